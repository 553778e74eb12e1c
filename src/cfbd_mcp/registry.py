"""Static tool catalog returned verbatim by ``tools/list``."""

from cfbd_mcp.config import (
    DEFAULT_MATCHUP_MIN_YEAR,
    DEFAULT_RECORDS_END,
    DEFAULT_RECORDS_START,
    DEFAULT_SEASON,
)

_TEAM = {"type": "string", "description": 'Team name (e.g., "oklahoma")'}
_YEAR = {"type": "number", "description": f"Season year (default: {DEFAULT_SEASON})"}

# Define the tools statically to avoid any computation during tool listing
TOOLS = [
    {
        "name": "get_player_stats",
        "description": "Get individual player statistics for a team, grouped by category. "
                       "Pass 'player' (a name or a question mentioning one) to get a single player's full stat line",
        "inputSchema": {
            "type": "object",
            "properties": {
                "team": _TEAM,
                "year": _YEAR,
                "player": {"type": "string", "description": "Player name or free-text question about a player"},
            },
            "required": ["team"]
        }
    },
    {
        "name": "get_team_stats",
        "description": "Get team season totals (total yards, total TDs, turnovers, etc.)",
        "inputSchema": {
            "type": "object",
            "properties": {"team": _TEAM, "year": _YEAR},
            "required": ["team"]
        }
    },
    {
        "name": "get_game_stats",
        "description": "Get game-by-game results for a team, or the box score of one game when an opponent is given",
        "inputSchema": {
            "type": "object",
            "properties": {
                "team": _TEAM,
                "year": _YEAR,
                "opponent": {"type": "string", "description": 'Opponent name (e.g., "texas")'},
            },
            "required": ["team"]
        }
    },
    {
        "name": "get_recruiting",
        "description": "Get recruiting class rankings",
        "inputSchema": {
            "type": "object",
            "properties": {
                "team": _TEAM,
                "year": {"type": "number", "description": f"Recruiting class year (default: {DEFAULT_SEASON})"},
            },
            "required": ["team"]
        }
    },
    {
        "name": "get_schedule",
        "description": "Get team schedule with results of completed games",
        "inputSchema": {
            "type": "object",
            "properties": {"team": _TEAM, "year": _YEAR},
            "required": ["team"]
        }
    },
    {
        "name": "get_play_by_play",
        "description": "Get the scoring plays of a game (or its opening plays when none scored)",
        "inputSchema": {
            "type": "object",
            "properties": {
                "gameId": {"type": "number", "description": "CFBD game id (see get_game_stats)"},
            },
            "required": ["gameId"]
        }
    },
    {
        "name": "get_conference_standings",
        "description": "Get conference standings ordered by conference record",
        "inputSchema": {
            "type": "object",
            "properties": {
                "conference": {"type": "string", "description": 'Conference abbreviation (e.g., "SEC", "B12")'},
                "year": _YEAR,
            },
            "required": ["conference"]
        }
    },
    {
        "name": "get_team_rankings",
        "description": "Get a team's poll rankings from the final week of a season",
        "inputSchema": {
            "type": "object",
            "properties": {"team": _TEAM, "year": _YEAR},
            "required": ["team"]
        }
    },
    {
        "name": "get_team_talent",
        "description": "Get a team's 247Sports talent composite rating and national rank",
        "inputSchema": {
            "type": "object",
            "properties": {"team": _TEAM, "year": _YEAR},
            "required": ["team"]
        }
    },
    {
        "name": "get_team_records",
        "description": "Get a team's win/loss record for each season in a range",
        "inputSchema": {
            "type": "object",
            "properties": {
                "team": _TEAM,
                "startYear": {"type": "number", "description": f"First season (default: {DEFAULT_RECORDS_START})"},
                "endYear": {"type": "number", "description": f"Last season (default: {DEFAULT_RECORDS_END})"},
            },
            "required": ["team"]
        }
    },
    {
        "name": "get_venue_info",
        "description": "Get stadium facts (capacity, location, surface, dome) for a team's home venue",
        "inputSchema": {
            "type": "object",
            "properties": {
                "team": {"type": "string", "description": "Team, stadium name or city to match"},
            },
            "required": ["team"]
        }
    },
    {
        "name": "get_returning_production",
        "description": "Get the share of last season's production returning (passing, rushing, receiving)",
        "inputSchema": {
            "type": "object",
            "properties": {"team": _TEAM, "year": _YEAR},
            "required": ["team"]
        }
    },
    {
        "name": "get_team_matchup",
        "description": "Get the head-to-head series record between two teams and their most recent meetings",
        "inputSchema": {
            "type": "object",
            "properties": {
                "team1": {"type": "string", "description": 'First team (e.g., "oklahoma")'},
                "team2": {"type": "string", "description": 'Second team (e.g., "texas")'},
                "minYear": {"type": "number", "description": f"Earliest season to include (default: {DEFAULT_MATCHUP_MIN_YEAR})"},
            },
            "required": ["team1", "team2"]
        }
    },
]


def tool_names():
    return {tool["name"] for tool in TOOLS}
