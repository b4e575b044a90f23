"""Shared GraphQL selection sets."""

MEDIA_TITLE = "title { romaji english native userPreferred }"
FUZZY_DATE = "{ year month day }"
COVER_IMAGE = "coverImage { extraLarge large medium color }"

MEDIA_COMMON_FIELDS = f"""
        id
        {MEDIA_TITLE}
        description(asHtml: false)
        format
        status
        startDate {FUZZY_DATE}
        endDate {FUZZY_DATE}
        genres
        averageScore
        meanScore
        popularity
        favourites
        hashtag
        countryOfOrigin
        isAdult
        source
        {COVER_IMAGE}
        bannerImage
        updatedAt
        siteUrl
"""

ANIME_FIELDS = f"""
        {MEDIA_COMMON_FIELDS}
        season
        seasonYear
        episodes
        duration
        trailer {{ id site thumbnail }}
        nextAiringEpisode {{ id airingAt timeUntilAiring episode mediaId }}
        studios {{
          edges {{
            isMain
            node {{ id name isAnimationStudio siteUrl }}
          }}
        }}
"""

MANGA_FIELDS = f"""
        {MEDIA_COMMON_FIELDS}
        chapters
        volumes
"""

CHARACTER_FIELDS = f"""
        id
        name {{ first middle last full native alternative alternativeSpoiler userPreferred }}
        image {{ large medium }}
        description(asHtml: false)
        gender
        dateOfBirth {FUZZY_DATE}
        age
        bloodType
        isFavourite
        isFavouriteBlocked
        siteUrl
        favourites
"""

STAFF_FIELDS = f"""
        id
        name {{ first middle last full native alternative userPreferred }}
        languageV2
        image {{ large medium }}
        description(asHtml: false)
        primaryOccupations
        gender
        dateOfBirth {FUZZY_DATE}
        dateOfDeath {FUZZY_DATE}
        age
        yearsActive
        homeTown
        bloodType
        isFavourite
        isFavouriteBlocked
        siteUrl
        favourites
"""

STUDIO_FIELDS = """
        id
        name
        isAnimationStudio
        isFavourite
        siteUrl
        favourites
"""

USER_FIELDS = """
        id
        name
        about(asHtml: false)
        avatar { large medium }
        bannerImage
        isFollowing
        isFollower
        isBlocked
        siteUrl
        donatorTier
        donatorBadge
        moderatorRoles
        createdAt
        updatedAt
        statistics {
          anime { count meanScore standardDeviation minutesWatched episodesWatched }
          manga { count meanScore standardDeviation chaptersRead volumesRead }
        }
"""

AIRING_FIELDS = f"""
        id
        airingAt
        timeUntilAiring
        episode
        mediaId
        media {{ id {MEDIA_TITLE} {COVER_IMAGE} }}
"""

SOCIAL_USER = "{ id name avatar { large medium } }"
SOCIAL_MEDIA = f"{{ id type format averageScore bannerImage siteUrl {MEDIA_TITLE} {COVER_IMAGE} }}"

THREAD_FIELDS = f"""
        id
        title
        body(asHtml: false)
        userId
        replyUserId
        replyCommentId
        categories {{ id name }}
        isLocked
        isSticky
        isSubscribed
        likeCount
        isLiked
        repliedAt
        createdAt
        updatedAt
        replyCount
        viewCount
        siteUrl
        user {{ id name avatar {{ large medium }} donatorTier donatorBadge moderatorRoles }}
        replyUser {SOCIAL_USER}
"""

THREAD_COMMENT_FIELDS = f"""
        id
        userId
        threadId
        comment(asHtml: false)
        likeCount
        isLiked
        createdAt
        updatedAt
        siteUrl
        user {SOCIAL_USER}
"""

REVIEW_FIELDS = f"""
        id
        userId
        mediaId
        mediaType
        summary
        body(asHtml: false)
        rating
        ratingAmount
        userRating
        score
        private
        siteUrl
        createdAt
        updatedAt
        user {SOCIAL_USER}
        media {SOCIAL_MEDIA}
"""

RECOMMENDATION_FIELDS = f"""
        id
        rating
        userRating
        media {SOCIAL_MEDIA}
        mediaRecommendation {SOCIAL_MEDIA}
        user {SOCIAL_USER}
"""

TEXT_ACTIVITY_FIELDS = f"""
        id
        userId
        type
        text(asHtml: false)
        replyCount
        likeCount
        isLiked
        isPinned
        isSubscribed
        isLocked
        siteUrl
        createdAt
        user {SOCIAL_USER}
"""

ACTIVITY_REPLY_FIELDS = f"""
        id
        userId
        activityId
        text(asHtml: false)
        likeCount
        isLiked
        createdAt
        user {SOCIAL_USER}
"""

# Activity is a union; each member is selected with its own fragment.
ACTIVITY_FIELDS = f"""
        ... on TextActivity {{ {TEXT_ACTIVITY_FIELDS} }}
        ... on ListActivity {{
          id
          userId
          type
          status
          progress
          replyCount
          likeCount
          isLiked
          isPinned
          isSubscribed
          isLocked
          siteUrl
          createdAt
          user {SOCIAL_USER}
          media {SOCIAL_MEDIA}
        }}
        ... on MessageActivity {{
          id
          type
          message(asHtml: false)
          replyCount
          likeCount
          isLiked
          isPrivate
          isSubscribed
          isLocked
          siteUrl
          createdAt
          messenger {SOCIAL_USER}
          recipient {SOCIAL_USER}
        }}
"""

NOTIFICATION_FIELDS = f"""
        ... on AiringNotification {{
          id type animeId episode contexts createdAt
          media {SOCIAL_MEDIA}
        }}
        ... on FollowingNotification {{ id type userId createdAt user {SOCIAL_USER} }}
        ... on ActivityMessageNotification {{ id type userId createdAt user {SOCIAL_USER} }}
        ... on ActivityMentionNotification {{ id type userId createdAt user {SOCIAL_USER} }}
        ... on ActivityReplyNotification {{ id type userId createdAt user {SOCIAL_USER} }}
        ... on ActivityLikeNotification {{ id type userId createdAt user {SOCIAL_USER} }}
        ... on ActivityReplyLikeNotification {{ id type userId createdAt user {SOCIAL_USER} }}
        ... on ThreadCommentMentionNotification {{ id type userId createdAt user {SOCIAL_USER} }}
        ... on ThreadCommentReplyNotification {{ id type userId createdAt user {SOCIAL_USER} }}
        ... on ThreadCommentLikeNotification {{ id type userId createdAt user {SOCIAL_USER} }}
        ... on ThreadLikeNotification {{ id type userId createdAt user {SOCIAL_USER} }}
        ... on RelatedMediaAdditionNotification {{
          id type createdAt
          media {SOCIAL_MEDIA}
        }}
"""
