"""GraphQL documents for anime operations.

Every document is a named operation (``query GetAnimeById(...)``) so the
operation name sent alongside it always matches the catalog key.
"""

from anilist_sdk.queries.fragments import (
    CHARACTER_FRAGMENT,
    MEDIA_FRAGMENT,
    STAFF_FRAGMENT,
    STUDIO_FRAGMENT,
)

GET_ANIME_BY_ID = (
    MEDIA_FRAGMENT
    + CHARACTER_FRAGMENT
    + STAFF_FRAGMENT
    + STUDIO_FRAGMENT
    + """
query GetAnimeById($id: Int, $page: Int = 1, $perPage: Int = 25) {
  Media(id: $id, type: ANIME) {
    ...MediaFragment
    characters(page: $page, perPage: $perPage) {
      pageInfo {
        hasNextPage
      }
      edges {
        role
        node {
          ...CharacterFragment
        }
      }
    }
    staff {
      edges {
        role
        node {
          ...StaffFragment
        }
      }
    }
    studios {
      edges {
        isMain
        node {
          ...StudioFragment
        }
      }
    }
  }
}
"""
)

GET_ANIME_CHARACTERS = (
    CHARACTER_FRAGMENT
    + """
query GetAnimeCharacters($id: Int, $page: Int = 1, $perPage: Int = 25) {
  Media(id: $id, type: ANIME) {
    id
    characters(page: $page, perPage: $perPage) {
      pageInfo {
        hasNextPage
      }
      edges {
        role
        node {
          ...CharacterFragment
        }
      }
    }
  }
}
"""
)

GET_ANIME_BY_TITLE = (
    MEDIA_FRAGMENT
    + """
query GetAnimeByTitle($title: String) {
  Media(search: $title, type: ANIME) {
    ...MediaFragment
  }
}
"""
)

SEARCH_ANIME = (
    MEDIA_FRAGMENT
    + """
query SearchAnime($query: String, $page: Int = 1, $perPage: Int = 10) {
  Page(page: $page, perPage: $perPage) {
    pageInfo {
      total
      perPage
      currentPage
      lastPage
      hasNextPage
    }
    media(search: $query, type: ANIME, sort: SEARCH_MATCH) {
      ...MediaFragment
    }
  }
}
"""
)

GET_ANIME_TRENDING = (
    MEDIA_FRAGMENT
    + """
query GetAnimeTrending($page: Int = 1, $perPage: Int = 10) {
  Page(page: $page, perPage: $perPage) {
    pageInfo {
      total
      perPage
      currentPage
      lastPage
      hasNextPage
    }
    media(type: ANIME, sort: TRENDING_DESC) {
      ...MediaFragment
    }
  }
}
"""
)

GET_ANIME_POPULAR = (
    MEDIA_FRAGMENT
    + """
query GetAnimePopular($page: Int = 1, $perPage: Int = 10) {
  Page(page: $page, perPage: $perPage) {
    pageInfo {
      total
      perPage
      currentPage
      lastPage
      hasNextPage
    }
    media(type: ANIME, sort: POPULARITY_DESC) {
      ...MediaFragment
    }
  }
}
"""
)

GET_ANIME_RECOMMENDATIONS = (
    MEDIA_FRAGMENT
    + """
query GetAnimeRecommendations($id: Int) {
  Media(id: $id, type: ANIME) {
    id
    recommendations(sort: RATING_DESC) {
      pageInfo {
        hasNextPage
      }
      nodes {
        id
        rating
        mediaRecommendation {
          ...MediaFragment
        }
      }
    }
  }
}
"""
)

GET_ANIME_STAFF = (
    STAFF_FRAGMENT
    + """
query GetAnimeStaff($id: Int) {
  Media(id: $id, type: ANIME) {
    id
    staff {
      pageInfo {
        hasNextPage
      }
      edges {
        role
        node {
          ...StaffFragment
        }
      }
    }
  }
}
"""
)

GET_ANIME_RELATIONS = (
    MEDIA_FRAGMENT
    + """
query GetAnimeRelations($id: Int) {
  Media(id: $id, type: ANIME) {
    id
    relations {
      edges {
        relationType
        node {
          ...MediaFragment
        }
      }
    }
  }
}
"""
)

GET_ANIME_LIST_BY_GENRE = (
    MEDIA_FRAGMENT
    + """
query GetAnimeListByGenre($genre: String, $page: Int = 1, $perPage: Int = 10) {
  Page(page: $page, perPage: $perPage) {
    pageInfo {
      total
      perPage
      currentPage
      lastPage
      hasNextPage
    }
    media(genre: $genre, type: ANIME, sort: POPULARITY_DESC) {
      ...MediaFragment
    }
  }
}
"""
)
