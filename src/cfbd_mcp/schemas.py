"""Typed records for the CFBD resources the tools read.

Every field is optional and lenient: a value of the wrong type decodes as
``None`` instead of failing the whole record, so formatters only ever see
"present" or "absent".
"""

from typing import Annotated, Any, List, Optional, Type, TypeVar

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, ValidationError, WrapValidator


def _or_none(value: Any, handler):
    try:
        return handler(value)
    except ValidationError:
        return None


def _or_empty(value: Any, handler):
    try:
        return handler(value)
    except ValidationError:
        return []


def _objects_only(value: Any) -> Any:
    if isinstance(value, list):
        return [item for item in value if isinstance(item, dict)]
    return value


def _stringify(value: Any) -> Any:
    # stat values arrive as "1234" or 1234 depending on the endpoint
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return value


Int = Annotated[Optional[int], WrapValidator(_or_none)]
Float = Annotated[Optional[float], WrapValidator(_or_none)]
Str = Annotated[Optional[str], WrapValidator(_or_none)]
Bool = Annotated[Optional[bool], WrapValidator(_or_none)]
Text = Annotated[Optional[str], BeforeValidator(_stringify), WrapValidator(_or_none)]


def Records(model):
    """A nested list of records; entries that are not objects are dropped."""
    return Annotated[List[model], BeforeValidator(_objects_only), WrapValidator(_or_empty)]


class Record(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class PlayerStat(Record):
    player: Str = None
    team: Str = None
    category: Str = None
    stat_type: Str = Field(None, alias="statType")
    stat: Text = None


class TeamStat(Record):
    team: Str = None
    stat_name: Str = Field(None, alias="statName")
    stat_value: Float = Field(None, alias="statValue")


class Game(Record):
    id: Int = None
    season: Int = None
    week: Int = None
    season_type: Str = None
    start_date: Str = None
    completed: Bool = None
    neutral_site: Bool = None
    venue: Str = None
    home_team: Str = None
    home_points: Int = None
    away_team: Str = None
    away_points: Int = None


class BoxScoreStat(Record):
    category: Str = None
    stat: Text = None


class BoxScoreTeam(Record):
    team: Str = Field(None, alias="school")
    home_away: Str = Field(None, alias="homeAway")
    points: Int = None
    stats: Records(BoxScoreStat) = []


class BoxScore(Record):
    id: Int = None
    teams: Records(BoxScoreTeam) = []


class RecruitingTeam(Record):
    year: Int = None
    rank: Int = None
    team: Str = None
    points: Float = None
    commits: Int = None
    average_rating: Float = Field(None, alias="averageRating")


class Clock(Record):
    minutes: Int = None
    seconds: Int = None


class Play(Record):
    offense: Str = None
    defense: Str = None
    period: Int = None
    clock: Annotated[Optional[Clock], WrapValidator(_or_none)] = None
    offense_score: Int = Field(None, alias="offenseScore")
    defense_score: Int = Field(None, alias="defenseScore")
    play_type: Str = Field(None, alias="playType")
    play_text: Str = Field(None, alias="playText")
    scoring: Bool = None


class WinLoss(Record):
    games: Int = None
    wins: Int = None
    losses: Int = None
    ties: Int = None


class TeamRecord(Record):
    year: Int = None
    team: Str = None
    conference: Str = None
    division: Str = None
    total: Annotated[Optional[WinLoss], WrapValidator(_or_none)] = None
    conference_games: Annotated[Optional[WinLoss], WrapValidator(_or_none)] = Field(None, alias="conferenceGames")


class PollRank(Record):
    rank: Int = None
    school: Str = None
    conference: Str = None
    first_place_votes: Int = Field(None, alias="firstPlaceVotes")
    points: Int = None


class Poll(Record):
    poll: Str = None
    ranks: Records(PollRank) = []


class RankingWeek(Record):
    season: Int = None
    season_type: Str = Field(None, alias="seasonType")
    week: Int = None
    polls: Records(Poll) = []


class TeamTalent(Record):
    year: Int = None
    team: Str = Field(None, alias="school")
    talent: Float = None


class Venue(Record):
    id: Int = None
    name: Str = None
    capacity: Int = None
    grass: Bool = None
    city: Str = None
    state: Str = None
    zip: Str = None
    country_code: Str = None
    elevation: Float = None
    year_constructed: Int = None
    dome: Bool = None
    timezone: Str = None


class ReturningProduction(Record):
    season: Int = None
    team: Str = None
    conference: Str = None
    total_ppa: Float = Field(None, alias="totalPPA")
    percent_ppa: Float = Field(None, alias="percentPPA")
    percent_passing_ppa: Float = Field(None, alias="percentPassingPPA")
    percent_rushing_ppa: Float = Field(None, alias="percentRushingPPA")
    percent_receiving_ppa: Float = Field(None, alias="percentReceivingPPA")
    usage: Float = None
    passing_usage: Float = Field(None, alias="passingUsage")
    rushing_usage: Float = Field(None, alias="rushingUsage")
    receiving_usage: Float = Field(None, alias="receivingUsage")


class MatchupGame(Record):
    season: Int = None
    week: Int = None
    season_type: Str = Field(None, alias="seasonType")
    date: Str = None
    neutral_site: Bool = Field(None, alias="neutralSite")
    venue: Str = None
    home_team: Str = Field(None, alias="homeTeam")
    home_score: Int = Field(None, alias="homeScore")
    away_team: Str = Field(None, alias="awayTeam")
    away_score: Int = Field(None, alias="awayScore")
    winner: Str = None


class Matchup(Record):
    team1: Str = None
    team2: Str = None
    start_year: Int = Field(None, alias="startYear")
    end_year: Int = Field(None, alias="endYear")
    team1_wins: Int = Field(None, alias="team1Wins")
    team2_wins: Int = Field(None, alias="team2Wins")
    ties: Int = None
    games: Records(MatchupGame) = []


M = TypeVar("M", bound=Record)


def decode_one(model: Type[M], payload: Any) -> Optional[M]:
    """Decode a single object; anything that is not a mapping is absent."""
    if not isinstance(payload, dict):
        return None
    try:
        return model.model_validate(payload)
    except ValidationError:
        return None


def decode_list(model: Type[M], payload: Any) -> List[M]:
    """Decode a JSON array, skipping elements that are not objects."""
    if not isinstance(payload, list):
        return []
    records = []
    for item in payload:
        record = decode_one(model, item)
        if record is not None:
            records.append(record)
    return records
