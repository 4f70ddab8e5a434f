"""Catalog of speedrun.com v2 API endpoints.

Each entry names a remote operation, the verb it is called with by default
and whether it returns a response body. ``Get*`` endpoints return data,
``Put*`` endpoints are fire-and-forget. ``has_response`` is set for every
``Get*`` endpoint, not only those with a documented response shape. Read endpoints that accept ``GET``
default to it; everything else is ``POST``. Wrapper methods on
:class:`speedruncom.SpeedrunClient` are generated from this table.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Final

from .protocol import Verb

_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")


@dataclass(frozen=True)
class Endpoint:
    """One named remote operation."""

    name: str
    verb: Verb = "post"
    has_response: bool = False

    @property
    def method_name(self) -> str:
        """Python method name, e.g. ``get_game_leaderboard``."""
        return _CAMEL_BOUNDARY.sub("_", self.name).lower()


AUTH_LOGIN: Final = Endpoint("PutAuthLogin", has_response=True)
AUTH_LOGOUT: Final = Endpoint("PutAuthLogout")

# Reached through login()/set_token()/logout() only
AUTH_ENDPOINTS: Final = frozenset({AUTH_LOGIN.name, AUTH_LOGOUT.name})

_GET_ENDPOINTS: Final = (
    Endpoint("GetGameLeaderboard2", "get", has_response=True),
    Endpoint("GetGameLeaderboard", "get", has_response=True),
    Endpoint("GetGameData", "get", has_response=True),
    Endpoint("GetGameSummary", "get", has_response=True),
    Endpoint("GetGameRecordHistory", "get", has_response=True),
    Endpoint("GetSearch", "get", has_response=True),
    Endpoint("GetLatestLeaderboard", "get", has_response=True),
    Endpoint("GetRun", "get", has_response=True),
    Endpoint("GetUserSummary", "get", has_response=True),
    Endpoint("GetUserComments", "get", has_response=True),
    Endpoint("GetUserThreads", "get", has_response=True),
    Endpoint("GetUserPopoverData", "get", has_response=True),
    Endpoint("GetTitleList", "get", has_response=True),
    Endpoint("GetTitle", "get", has_response=True),
    Endpoint("GetArticleList", "get", has_response=True),
    Endpoint("GetArticle", "get", has_response=True),
    Endpoint("GetGameList", "get", has_response=True),
    Endpoint("GetPlatformList", "get", has_response=True),
    Endpoint("GetHomeSummary", "get", has_response=True),
    Endpoint("GetSeriesList", "get", has_response=True),
    Endpoint("GetSeriesSummary", "get", has_response=True),
    Endpoint("GetGameLevelSummary", "get", has_response=True),
    Endpoint("GetGameRandom", "get", has_response=True),
    Endpoint("GetGuideList", "get", has_response=True),
    Endpoint("GetGuide", "get", has_response=True),
    Endpoint("GetNewsList", "get", has_response=True),
    Endpoint("GetNews", "get", has_response=True),
    Endpoint("GetResource", "get", has_response=True),
    Endpoint("GetResourceList", "get", has_response=True),
    Endpoint("GetStreamList", "get", has_response=True),
    Endpoint("GetThreadList", "get", has_response=True),
    Endpoint("GetThreadStateByCommentId", "get", has_response=True),
    Endpoint("GetChallenge", "get", has_response=True),
    Endpoint("GetChallengeLeaderboard", "get", has_response=True),
    Endpoint("GetChallengeGlobalRankingList", "get", has_response=True),
    Endpoint("GetChallengeRun", "get", has_response=True),
    Endpoint("GetUserLeaderboard", "get", has_response=True),
    Endpoint("GetUserModeration", "get", has_response=True),
    Endpoint("GetCommentList", "get", has_response=True),
    Endpoint("GetThread", "get", has_response=True),
    Endpoint("GetStaticData", "get", has_response=True),
    Endpoint("GetForumList", "get", has_response=True),
)

_POST_ENDPOINTS: Final = (
    Endpoint("GetSession", has_response=True),
    Endpoint("PutSessionPing"),
    Endpoint("GetAuditLogList", has_response=True),
    Endpoint("GetGameSettings", has_response=True),
    Endpoint("PutGameSettings"),
    Endpoint("PutCategory"),
    Endpoint("PutCategoryUpdate"),
    Endpoint("PutCategoryArchive"),
    Endpoint("PutCategoryRestore"),
    Endpoint("PutCategoryOrder"),
    Endpoint("PutLevel"),
    Endpoint("PutLevelUpdate"),
    Endpoint("PutLevelArchive"),
    Endpoint("PutLevelRestore"),
    Endpoint("PutLevelOrder"),
    Endpoint("PutVariable"),
    Endpoint("PutVariableUpdate"),
    Endpoint("PutVariableArchive"),
    Endpoint("PutVariableRestore"),
    Endpoint("PutVariableOrder"),
    Endpoint("PutVariableApplyDefault"),
    Endpoint("PutNews"),
    Endpoint("PutNewsUpdate"),
    Endpoint("PutNewsDelete"),
    Endpoint("PutGuide"),
    Endpoint("PutGuideUpdate"),
    Endpoint("PutGuideDelete"),
    Endpoint("PutResource"),
    Endpoint("PutResourceUpdate"),
    Endpoint("PutResourceDelete"),
    Endpoint("GetModerationGames", has_response=True),
    Endpoint("GetModerationRuns", has_response=True),
    Endpoint("PutRunAssignee"),
    Endpoint("PutRunDelete"),
    Endpoint("PutRunVerification"),
    Endpoint("PutRunVideoState"),
    Endpoint("GetRunSettings", has_response=True),
    Endpoint("PutRunSettings"),
    Endpoint("GetConversations", has_response=True),
    Endpoint("GetConversationMessages", has_response=True),
    Endpoint("PutConversation"),
    Endpoint("PutConversationMessage"),
    Endpoint("PutConversationLeave"),
    Endpoint("PutConversationReport"),
    Endpoint("GetNotifications", has_response=True),
    Endpoint("PutNotificationsRead"),
    Endpoint("PutGameFollower"),
    Endpoint("PutGameFollowerDelete"),
    Endpoint("PutUserFollower"),
    Endpoint("PutUserFollowerDelete"),
    Endpoint("GetUserSettings", has_response=True),
    Endpoint("PutUserSettings"),
    Endpoint("PutUserUpdateFeaturedRun"),
    Endpoint("PutUserUpdateGameOrdering"),
    Endpoint("GetUserApiKey", has_response=True),
    Endpoint("GetUserFollowers", has_response=True),
    Endpoint("GetUserFollowingGames", has_response=True),
    Endpoint("GetUserFollowingUsers", has_response=True),
    Endpoint("GetUserGameBoostData", has_response=True),
    Endpoint("GetUserDataExport", has_response=True),
    Endpoint("PutGameFollowerOrder"),
    Endpoint("PutArticleSubmission"),
    Endpoint("GetCommentable", has_response=True),
    Endpoint("PutComment"),
    Endpoint("PutLike"),
    Endpoint("PutCommentableSettings"),
    Endpoint("GetThreadReadStatus", has_response=True),
    Endpoint("PutThreadRead"),
    Endpoint("GetForumReadStatus", has_response=True),
    Endpoint("GetThemeSettings", has_response=True),
    Endpoint("PutThemeSettings"),
    Endpoint("GetUserSupporterData", has_response=True),
    Endpoint("PutUserSupporterNewSubscription"),
    Endpoint("PutGameBoostGrant"),
    Endpoint("PutAdvertiseContact"),
    Endpoint("GetTickets", has_response=True),
    Endpoint("GetSeriesSettings", has_response=True),
    Endpoint("GetUserBlocks", has_response=True),
    Endpoint("PutUserBlock"),
    Endpoint("PutGame"),
    Endpoint("PutGameModerator"),
    Endpoint("PutGameModeratorDelete"),
    Endpoint("PutSeriesGame"),
    Endpoint("PutSeriesGameDelete"),
    Endpoint("PutSeriesModerator"),
    Endpoint("PutSeriesModeratorUpdate"),
    Endpoint("PutSeriesModeratorDelete"),
    Endpoint("PutSeriesSettings"),
    Endpoint("PutTicket"),
    Endpoint("PutTicketNote"),
    Endpoint("PutUserSocialConnection"),
    Endpoint("PutUserSocialConnectionDelete"),
    Endpoint("PutUserSocialConnectionSsoExchange"),
    Endpoint("PutUserUpdatePassword"),
    Endpoint("PutUserUpdateEmail"),
    Endpoint("PutUserUpdateName"),
    Endpoint("PutUserDelete"),
    Endpoint("PutCommentDelete"),
    Endpoint("PutCommentRestore"),
    Endpoint("PutThread"),
    Endpoint("PutThreadLocked"),
    Endpoint("PutThreadSticky"),
    Endpoint("PutThreadDelete"),
)

ENDPOINTS: Final[dict[str, Endpoint]] = {
    endpoint.name: endpoint
    for endpoint in (AUTH_LOGIN, AUTH_LOGOUT, *_GET_ENDPOINTS, *_POST_ENDPOINTS)
}


def get_endpoint(name: str) -> Endpoint:
    """Look up a catalog entry by its API name."""
    try:
        return ENDPOINTS[name]
    except KeyError:
        raise KeyError(f"Unknown endpoint: {name}") from None
