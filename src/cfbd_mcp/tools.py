"""Tool executor: argument defaulting, one upstream fetch, text formatting."""

import logging
from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable, Dict, Optional, Tuple

from cfbd_mcp import formatters
from cfbd_mcp.config import (
    DEFAULT_MATCHUP_MIN_YEAR,
    DEFAULT_RECORDS_END,
    DEFAULT_RECORDS_START,
    DEFAULT_SEASON,
    DEFAULT_TEAM,
    Settings,
)
from cfbd_mcp.errors import (
    ToolArgumentError,
    UnknownToolError,
    UpstreamRequestError,
    UpstreamStatusError,
)

logger = logging.getLogger(__name__)

MISSING_API_KEY = "Error: CFBD API key not configured"


@dataclass(frozen=True)
class UpstreamQuery:
    path: str
    params: Dict[str, Any] = field(default_factory=dict)


Builder = Callable[[Dict[str, Any]], Tuple[UpstreamQuery, Dict[str, Any]]]
Formatter = Callable[..., str]
Handler = Callable[[Any, Dict[str, Any]], Awaitable[str]]


# Argument helpers. Defaults apply only when the value is absent or falsy.

def team_arg(arguments: Dict[str, Any], key: str = "team") -> str:
    value = arguments.get(key)
    if not value:
        return DEFAULT_TEAM
    return str(value).strip().lower()


def year_arg(arguments: Dict[str, Any], key: str = "year", default: int = DEFAULT_SEASON) -> int:
    value = arguments.get(key)
    if isinstance(value, bool):
        raise ToolArgumentError(f"{key} must be a year, got {value!r}")
    if not value:
        return default
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ToolArgumentError(f"{key} must be a year, got {value!r}")


def required_arg(arguments: Dict[str, Any], key: str) -> str:
    value = arguments.get(key)
    if value is None or not str(value).strip():
        raise ToolArgumentError(f"{key} is required")
    return str(value).strip()


def upstream_tool(build: Builder, formatter: Formatter) -> Handler:
    """Build a handler that fetches ``build``'s query and hands the payload to ``formatter``."""
    async def run(client, arguments: Dict[str, Any]) -> str:
        query, context = build(arguments)
        payload = await client.get(query.path, query.params)
        return formatter(payload, **context)
    return run


# Query builders, one per upstream resource

def _team_season(path: str) -> Builder:
    def build(arguments):
        team, year = team_arg(arguments), year_arg(arguments)
        return UpstreamQuery(path, {"year": year, "team": team}), {"team": team, "year": year}
    return build


def _player_stats(arguments):
    query, context = _team_season("/stats/player/season")(arguments)
    player = arguments.get("player")
    context["player"] = str(player).strip() if player else None
    return query, context


def _play_by_play(arguments):
    raw = required_arg(arguments, "gameId")
    try:
        game_id = int(raw)
    except ValueError:
        raise ToolArgumentError(f"gameId must be a number, got {raw!r}")
    return UpstreamQuery("/plays", {"gameId": game_id}), {"game_id": game_id}


def _standings(arguments):
    conference, year = required_arg(arguments, "conference"), year_arg(arguments)
    return UpstreamQuery("/records", {"year": year, "conference": conference}), {
        "conference": conference,
        "year": year,
    }


def _season_wide(path: str) -> Builder:
    # Resources listed for every team; the formatter picks ours out
    def build(arguments):
        team, year = team_arg(arguments), year_arg(arguments)
        return UpstreamQuery(path, {"year": year}), {"team": team, "year": year}
    return build


def _records(arguments):
    team = team_arg(arguments)
    start = year_arg(arguments, "startYear", DEFAULT_RECORDS_START)
    end = year_arg(arguments, "endYear", DEFAULT_RECORDS_END)
    if start > end:
        raise ToolArgumentError(f"startYear ({start}) is after endYear ({end})")
    return UpstreamQuery("/records", {"team": team}), {"team": team, "start_year": start, "end_year": end}


def _venues(arguments):
    team = team_arg(arguments)
    return UpstreamQuery("/venues"), {"team": team}


def _matchup(arguments):
    team1 = required_arg(arguments, "team1").lower()
    team2 = required_arg(arguments, "team2").lower()
    min_year = year_arg(arguments, "minYear", DEFAULT_MATCHUP_MIN_YEAR)
    params = {"team1": team1, "team2": team2, "minYear": min_year}
    return UpstreamQuery("/teams/matchup", params), {"team1": team1, "team2": team2, "min_year": min_year}


async def game_stats(client, arguments: Dict[str, Any]) -> str:
    """Season results, or one game's box score when ``opponent`` is given."""
    team, year = team_arg(arguments), year_arg(arguments)
    opponent = str(arguments.get("opponent") or "").strip()
    games = await client.get("/games", {"year": year, "team": team})
    if not opponent:
        return formatters.format_game_results(games, team, year)

    game = formatters.find_game(games, team, opponent)
    if game is None or game.id is None:
        return formatters.format_game_not_found(games, team, year, opponent)
    box_score = await client.get("/games/teams", {"year": year, "id": game.id})
    return formatters.format_box_score(box_score, game, team, year)


HANDLERS: Dict[str, Handler] = {
    "get_player_stats": upstream_tool(_player_stats, formatters.format_player_stats),
    "get_team_stats": upstream_tool(_team_season("/stats/season"), formatters.format_team_stats),
    "get_game_stats": game_stats,
    "get_recruiting": upstream_tool(_team_season("/recruiting/teams"), formatters.format_recruiting),
    "get_schedule": upstream_tool(_team_season("/games"), formatters.format_schedule),
    "get_play_by_play": upstream_tool(_play_by_play, formatters.format_play_by_play),
    "get_conference_standings": upstream_tool(_standings, formatters.format_standings),
    "get_team_rankings": upstream_tool(_season_wide("/rankings"), formatters.format_rankings),
    "get_team_talent": upstream_tool(_season_wide("/talent"), formatters.format_talent),
    "get_team_records": upstream_tool(_records, formatters.format_team_records),
    "get_venue_info": upstream_tool(_venues, formatters.format_venue),
    "get_returning_production": upstream_tool(
        _team_season("/player/returning"), formatters.format_returning_production
    ),
    "get_team_matchup": upstream_tool(_matchup, formatters.format_matchup),
}


class ToolExecutor:
    """Runs a named tool and always answers with text.

    Only an unknown tool name raises (``UnknownToolError``); missing
    credentials, bad arguments and upstream failures come back as readable
    messages in the tool result.
    """

    def __init__(self, settings: Settings, client, handlers: Optional[Dict[str, Handler]] = None):
        self.settings = settings
        self.client = client
        self.handlers = HANDLERS if handlers is None else handlers

    def names(self):
        return set(self.handlers)

    async def call(self, name: str, arguments: Optional[Dict[str, Any]] = None) -> str:
        handler = self.handlers.get(name) if isinstance(name, str) else None
        if handler is None:
            raise UnknownToolError(name)
        if not self.settings.cfbd_api_key:
            return MISSING_API_KEY

        try:
            return await handler(self.client, arguments or {})
        except ToolArgumentError as e:
            return f"Error: {e}"
        except UpstreamStatusError as e:
            return f"CFBD API error: {e.status}"
        except UpstreamRequestError as e:
            logger.warning(f"{name} failed: {e}")
            return f"Error: {e}"
