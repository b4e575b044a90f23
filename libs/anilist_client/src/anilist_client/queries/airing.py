from .fields import AIRING_FIELDS

_SCHEDULES = f"""
query (
  $page: Int
  $perPage: Int
  $mediaId: Int
  $airingAtGreater: Int
  $airingAtLesser: Int
  $sort: [AiringSort]
) {{
  Page(page: $page, perPage: $perPage) {{
    airingSchedules(
      mediaId: $mediaId
      airingAt_greater: $airingAtGreater
      airingAt_lesser: $airingAtLesser
      sort: $sort
    ) {{ {AIRING_FIELDS} }}
  }}
}}
"""

# AniList ignores null arguments, so one selection serves every listing.
GET_UPCOMING_EPISODES = _SCHEDULES
GET_TODAY_EPISODES = _SCHEDULES
GET_RECENTLY_AIRED = _SCHEDULES
GET_SCHEDULE_FOR_MEDIA = _SCHEDULES
GET_EPISODES_IN_RANGE = _SCHEDULES

GET_NEXT_EPISODE = f"""
query ($mediaId: Int, $airingAtGreater: Int) {{
  Page(page: 1, perPage: 1) {{
    airingSchedules(mediaId: $mediaId, airingAt_greater: $airingAtGreater, sort: TIME) {{
      {AIRING_FIELDS}
    }}
  }}
}}
"""

GET_SCHEDULE_BY_ID = f"""
query ($id: Int) {{
  AiringSchedule(id: $id) {{ {AIRING_FIELDS} }}
}}
"""
