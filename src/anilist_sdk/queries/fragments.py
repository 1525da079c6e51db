"""Shared GraphQL field selections.

Each fragment is a plain string named after the GraphQL fragment it defines.
Query documents embed the fragments they spread; a document must contain each
fragment definition at most once.
"""

MEDIA_FRAGMENT = """
fragment MediaFragment on Media {
  id
  idMal
  title {
    romaji
    english
    native
    userPreferred
  }
  type
  format
  status
  description(asHtml: false)
  episodes
  duration
  season
  seasonYear
  startDate {
    year
    month
    day
  }
  endDate {
    year
    month
    day
  }
  genres
  averageScore
  meanScore
  popularity
  favourites
  trending
  isAdult
  coverImage {
    extraLarge
    large
    medium
    color
  }
  bannerImage
  siteUrl
}
"""

CHARACTER_FRAGMENT = """
fragment CharacterFragment on Character {
  id
  name {
    first
    last
    full
    native
    userPreferred
  }
  image {
    large
    medium
  }
  description
  gender
  age
  dateOfBirth {
    year
    month
    day
  }
  favourites
  siteUrl
}
"""

STAFF_FRAGMENT = """
fragment StaffFragment on Staff {
  id
  name {
    first
    last
    full
    native
    userPreferred
  }
  image {
    large
    medium
  }
  languageV2
  primaryOccupations
  gender
  favourites
  siteUrl
}
"""

STUDIO_FRAGMENT = """
fragment StudioFragment on Studio {
  id
  name
  isAnimationStudio
  favourites
  siteUrl
}
"""
