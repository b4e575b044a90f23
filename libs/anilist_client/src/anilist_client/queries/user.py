from .fields import COVER_IMAGE, FUZZY_DATE, MEDIA_TITLE, USER_FIELDS


def _page(arguments: str, params: str = "") -> str:
    return f"""
    query ($page: Int, $perPage: Int{params}) {{
      Page(page: $page, perPage: $perPage) {{
        users({arguments}) {{ {USER_FIELDS} }}
      }}
    }}
    """


GET_CURRENT_USER = f"""
query {{
  Viewer {{
    {USER_FIELDS}
    unreadNotificationCount
  }}
}}
"""

GET_BY_ID = f"""
query ($id: Int) {{
  User(id: $id) {{ {USER_FIELDS} }}
}}
"""

GET_BY_NAME = f"""
query ($name: String) {{
  User(name: $name) {{ {USER_FIELDS} }}
}}
"""

SEARCH = _page("search: $search", ", $search: String")
GET_MOST_ANIME_WATCHED = _page("sort: WATCHED_TIME_DESC")
GET_MOST_MANGA_READ = _page("sort: CHAPTERS_READ_DESC")

GET_CURRENT_USER_ANIME_LIST = f"""
query ($userId: Int, $type: MediaType, $status: MediaListStatus) {{
  MediaListCollection(userId: $userId, type: $type, status: $status) {{
    lists {{
      name
      entries {{
        id
        userId
        mediaId
        status
        score
        progress
        progressVolumes
        repeat
        priority
        private
        notes
        hiddenFromStatusLists
        customLists
        advancedScores
        startedAt {FUZZY_DATE}
        completedAt {FUZZY_DATE}
        updatedAt
        createdAt
        media {{
          id
          {MEDIA_TITLE}
          {COVER_IMAGE}
          format
          status
          episodes
          chapters
          volumes
          season
          seasonYear
          averageScore
          genres
        }}
      }}
    }}
  }}
}}
"""

TOGGLE_FOLLOW = f"""
mutation ($userId: Int) {{
  ToggleFollow(userId: $userId) {{ {USER_FIELDS} }}
}}
"""

TOGGLE_FAVORITE = """
mutation ($animeId: Int, $mangaId: Int) {
  ToggleFavourite(animeId: $animeId, mangaId: $mangaId) {
    anime { nodes { id } }
    manga { nodes { id } }
  }
}
"""

UPDATE_MEDIA_LIST_PROGRESS = """
mutation ($saveMediaListEntryId: Int, $progress: Int) {
  SaveMediaListEntry(id: $saveMediaListEntryId, progress: $progress) {
    id
    progress
  }
}
"""

UPDATE_MEDIA_LIST_STATUS = """
mutation ($saveMediaListEntryId: Int, $status: MediaListStatus, $completedAt: FuzzyDateInput) {
  SaveMediaListEntry(id: $saveMediaListEntryId, status: $status, completedAt: $completedAt) {
    id
    status
    completedAt { year month day }
  }
}
"""
