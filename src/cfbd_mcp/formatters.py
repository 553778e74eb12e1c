"""Turn CFBD payloads into the plain-text summaries returned to MCP clients.

Each ``format_*`` function takes the decoded JSON payload for one upstream
resource plus the arguments the tool resolved, and returns the text for the
tool result. Empty payloads produce a "no data" message before any
formatting is attempted, and a malformed payload is never an exception.
"""

from datetime import datetime
from typing import Any, Iterable, List, Optional

import numpy as np
import pandas as pd

from cfbd_mcp.config import DEFAULT_SEASON
from cfbd_mcp.schemas import (
    BoxScore,
    Game,
    Matchup,
    PlayerStat,
    Play,
    RankingWeek,
    RecruitingTeam,
    ReturningProduction,
    TeamRecord,
    TeamStat,
    TeamTalent,
    Venue,
    decode_list,
    decode_one,
)

# Column used to rank players inside each stat category
PRIMARY_STAT = {
    "passing": "YDS",
    "rushing": "YDS",
    "receiving": "YDS",
    "defensive": "TOT",
    "interceptions": "INT",
    "fumbles": "FUM",
    "kicking": "PTS",
    "punting": "YDS",
    "kickReturns": "YDS",
    "puntReturns": "YDS",
}

TEAM_STAT_FIELDS = [
    ("games", "Games"),
    ("totalYards", "Total Yards"),
    ("netPassingYards", "Passing Yards"),
    ("rushingYards", "Rushing Yards"),
    ("passingTDs", "Passing TDs"),
    ("rushingTDs", "Rushing TDs"),
    ("firstDowns", "First Downs"),
    ("thirdDownConversions", "Third Down Conversions"),
    ("thirdDowns", "Third Down Attempts"),
    ("turnovers", "Turnovers"),
    ("interceptions", "Interceptions Thrown"),
    ("fumblesLost", "Fumbles Lost"),
    ("passesIntercepted", "Interceptions (Defense)"),
    ("sacks", "Sacks"),
    ("penalties", "Penalties"),
    ("penaltyYards", "Penalty Yards"),
    ("possessionTime", "Possession Time (sec)"),
]

BOX_SCORE_FIELDS = [
    ("totalYards", "Total Yards"),
    ("netPassingYards", "Passing Yards"),
    ("completionAttempts", "Comp-Att"),
    ("rushingYards", "Rushing Yards"),
    ("rushingAttempts", "Rush Attempts"),
    ("firstDowns", "First Downs"),
    ("thirdDownEff", "3rd Down"),
    ("fourthDownEff", "4th Down"),
    ("turnovers", "Turnovers"),
    ("totalPenaltiesYards", "Penalties-Yards"),
    ("possessionTime", "Possession"),
]


def header(title: str, subject: str, year: Optional[Any] = None) -> str:
    suffix = f" ({year})" if year is not None else ""
    return f"🏈 {subject.upper()} {title}{suffix}\n\n"


def number(value: Any) -> str:
    """Render a stat value: whole numbers without decimals, others to one place."""
    if value is None:
        return "N/A"
    try:
        value = float(value)
    except (TypeError, ValueError):
        return str(value)
    if not np.isfinite(value):
        return "N/A"
    if value.is_integer():
        return f"{int(value):,}"
    return f"{value:,.1f}"


def percent(fraction: Optional[float]) -> str:
    if fraction is None or not np.isfinite(fraction):
        return "not reported"
    return f"{fraction * 100:.1f}%"


def outcome(ours: int, theirs: int) -> str:
    if ours > theirs:
        return "W"
    if ours < theirs:
        return "L"
    return "T"


def win_loss(wins: Optional[int], losses: Optional[int], ties: Optional[int] = None) -> str:
    text = f"{wins or 0}-{losses or 0}"
    if ties:
        text += f"-{ties}"
    return text


def same_team(name: Optional[str], team: str) -> bool:
    return bool(name) and name.strip().lower() == team.strip().lower()


def _short_date(value: Optional[str]) -> str:
    if not value:
        return "TBD"
    try:
        day = datetime.strptime(value[:10], "%Y-%m-%d")
    except ValueError:
        return "TBD"
    return f"{day:%b} {day.day}"


# ---------------------------------------------------------------------------
# get_player_stats
# ---------------------------------------------------------------------------

def match_player(names: Iterable[str], text: str) -> Optional[str]:
    """Pick the player a free-text question is about.

    Tries an exact name, then a full name mentioned anywhere in the text
    ("how did Jackson Arnold play"), then a partial name ("arnold").
    """
    query = " ".join(text.lower().replace("?", " ").replace(",", " ").split())
    if not query:
        return None
    ordered = sorted(set(names))
    for name in ordered:
        if name.lower() == query:
            return name
    mentioned = [name for name in ordered if name.lower() in query]
    if mentioned:
        # Longest mention wins so "Jalil Farooq Jr." beats "Jalil Farooq"
        return max(mentioned, key=len)
    for name in ordered:
        if query in name.lower():
            return name
    return None


def _stat_frame(payload: Any) -> pd.DataFrame:
    rows = [
        {
            "player": row.player,
            "category": row.category or "other",
            "stat_type": row.stat_type,
            "value": row.stat,
        }
        for row in decode_list(PlayerStat, payload)
        if row.player and row.stat_type
    ]
    frame = pd.DataFrame(rows, columns=["player", "category", "stat_type", "value"])
    frame["value"] = pd.to_numeric(frame["value"], errors="coerce")
    return frame.dropna(subset=["value"])


def _stat_line(values: pd.Series, first: Optional[str] = None) -> str:
    columns = sorted(values.index)
    if first in columns:
        columns.remove(first)
        columns.insert(0, first)
    parts = [f"{col} {number(values[col])}" for col in columns if np.isfinite(values[col])]
    return ", ".join(parts)


def format_player_stats(payload: Any, team: str, year: int, player: Optional[str] = None, top: int = 5) -> str:
    frame = _stat_frame(payload)
    if frame.empty:
        return f"No player stats found for {team} in {year}"

    if player:
        name = match_player(frame["player"].unique(), player)
        if name is None:
            return f"No player matching '{player}' found in {team}'s {year} stats"
        text = header(f"- {name.upper()} ({year})", team, None)
        own = frame[frame["player"] == name]
        for category in own["category"].unique():
            values = own[own["category"] == category].groupby("stat_type")["value"].first()
            text += f"{category.upper()}: {_stat_line(values, PRIMARY_STAT.get(category))}\n"
        return text

    text = header("PLAYER STATS", team, year)
    for category in frame["category"].unique():
        table = frame[frame["category"] == category].pivot_table(
            index="player", columns="stat_type", values="value", aggfunc="first"
        )
        sort_by = PRIMARY_STAT.get(category)
        if sort_by not in table.columns:
            sort_by = table.columns[0]
        table = table.sort_values(by=sort_by, ascending=False, kind="mergesort").head(top)
        text += f"{category.upper()}:\n"
        for name, values in table.iterrows():
            text += f"  {name}: {_stat_line(values, sort_by)}\n"
        text += "\n"
    return text


# ---------------------------------------------------------------------------
# get_team_stats
# ---------------------------------------------------------------------------

def format_team_stats(payload: Any, team: str, year: int) -> str:
    values = {
        row.stat_name: row.stat_value
        for row in decode_list(TeamStat, payload)
        if row.stat_name and row.stat_value is not None
    }
    if not values:
        return f"No team stats found for {team} in {year}"

    lines = [f"  {label}: {number(values[key])}" for key, label in TEAM_STAT_FIELDS if key in values]
    if not lines:
        return f"Team stats for {team} in {year} did not include any season totals"
    return header("TEAM STATS", team, year) + "SEASON TOTALS:\n" + "\n".join(lines) + "\n"


# ---------------------------------------------------------------------------
# get_game_stats / get_schedule
# ---------------------------------------------------------------------------

def _perspective(game: Game, team: str):
    """Return (is_home, opponent, our_points, their_points) for ``team``."""
    is_home = same_team(game.home_team, team)
    opponent = game.away_team if is_home else game.home_team
    ours = game.home_points if is_home else game.away_points
    theirs = game.away_points if is_home else game.home_points
    return is_home, opponent or "TBD", ours, theirs


def _location(game: Game, is_home: bool) -> str:
    if game.neutral_site:
        return "vs"
    return "vs" if is_home else "@"


def format_game_results(payload: Any, team: str, year: int) -> str:
    games = decode_list(Game, payload)
    if not games:
        return f"No games found for {team} in {year}"

    text = header("GAME RESULTS", team, year)
    wins = losses = ties = 0
    for game in games:
        is_home, opponent, ours, theirs = _perspective(game, team)
        week = f"Week {game.week}: " if game.week is not None else ""
        location = _location(game, is_home)
        if ours is None or theirs is None:
            text += f"{week}{location} {opponent} (not played)\n"
            continue
        result = outcome(ours, theirs)
        if result == "W":
            wins += 1
        elif result == "L":
            losses += 1
        else:
            ties += 1
        text += f"{week}{result} {location} {opponent} {ours}-{theirs}\n"

    text += f"\nRecord: {win_loss(wins, losses, ties)}\n"
    return text


def find_game(payload: Any, team: str, opponent: str) -> Optional[Game]:
    """First game of the season whose opponent name contains ``opponent``."""
    needle = opponent.strip().lower()
    for game in decode_list(Game, payload):
        _, other, _, _ = _perspective(game, team)
        if needle and (needle == other.lower() or needle in other.lower()):
            return game
    return None


def format_game_not_found(payload: Any, team: str, year: int, opponent: str) -> str:
    games = decode_list(Game, payload)
    if not games:
        return f"No games found for {team} in {year}"
    opponents = ", ".join(sorted({_perspective(g, team)[1] for g in games}))
    return f"No {year} game found between {team} and {opponent}. Opponents that season: {opponents}"


def format_box_score(payload: Any, game: Game, team: str, year: int) -> str:
    is_home, opponent, ours, theirs = _perspective(game, team)
    location = _location(game, is_home)
    text = header(f"{location} {opponent.upper()}", team, year)
    if ours is not None and theirs is not None:
        text += f"Final: {outcome(ours, theirs)} {ours}-{theirs}\n"
    if game.week is not None:
        text += f"Week {game.week}, {_short_date(game.start_date)}"
        text += f" at {game.venue}\n" if game.venue else "\n"

    box_scores = decode_list(BoxScore, payload)
    teams = box_scores[0].teams if box_scores else []
    if not teams:
        return text + "\nDetailed box score not available for this game yet.\n"

    # Requested team first
    teams = sorted(teams, key=lambda t: not same_team(t.team, team))
    for side in teams:
        stats = {s.category: s.stat for s in side.stats if s.category and s.stat is not None}
        text += f"\n{(side.team or 'Unknown').upper()}"
        text += f" ({side.points} pts):\n" if side.points is not None else ":\n"
        lines = [f"  {label}: {stats[key]}" for key, label in BOX_SCORE_FIELDS if key in stats]
        text += "\n".join(lines) + "\n" if lines else "  No team stats reported\n"
    return text


def format_schedule(payload: Any, team: str, year: int) -> str:
    games = decode_list(Game, payload)
    if not games:
        return f"No schedule found for {team} in {year}"

    text = header("SCHEDULE", team, year)
    for game in games:
        is_home, opponent, ours, theirs = _perspective(game, team)
        when = _short_date(game.start_date)
        if game.week is not None:
            when = f"Week {game.week} ({when})"
        line = f"{when}: {_location(game, is_home)} {opponent}"
        if game.neutral_site:
            line += " (neutral site)"
        if ours is not None and theirs is not None:
            line += f" - {outcome(ours, theirs)} {ours}-{theirs}"
        text += line + "\n"
    return text


# ---------------------------------------------------------------------------
# get_recruiting
# ---------------------------------------------------------------------------

def _recruiting_guidance(team: str, year: int) -> str:
    if year > DEFAULT_SEASON:
        return (
            f"No recruiting data found for {team} in {year}.\n\n"
            f"The {year} class is still being assembled. Team rankings are "
            "published once commitments start to sign, so check back after the "
            f"early signing period or try {DEFAULT_SEASON}."
        )
    if year < 2000:
        return (
            f"No recruiting data found for {team} in {year}.\n\n"
            "Team recruiting rankings only go back to the 2000 class."
        )
    return (
        f"No recruiting data found for {team} in {year}.\n\n"
        "Things to check:\n"
        "1. Team name: use the school name as CFBD lists it (e.g. 'oklahoma', 'ohio state').\n"
        "2. Class year: a class is filed under the year its players sign, "
        "one season before they play.\n"
        "3. Programs outside FBS are often missing from team rankings; "
        "try an adjacent year to confirm the team is tracked."
    )


def format_recruiting(payload: Any, team: str, year: int) -> str:
    classes = decode_list(RecruitingTeam, payload)
    match = next((c for c in classes if same_team(c.team, team)), classes[0] if classes else None)
    if match is None or (match.rank is None and match.points is None):
        return _recruiting_guidance(team, year)

    text = header("RECRUITING", team, year)
    text += f"National Rank: #{match.rank if match.rank is not None else 'N/A'}\n"
    if match.commits is not None:
        text += f"Total Commits: {match.commits}\n"
    if match.average_rating is not None:
        text += f"Average Rating: {match.average_rating:.2f}\n"
    text += f"Total Points: {f'{match.points:.2f}' if match.points is not None else 'N/A'}\n"
    return text


# ---------------------------------------------------------------------------
# get_play_by_play
# ---------------------------------------------------------------------------

def _is_scoring(play: Play) -> bool:
    if play.scoring:
        return True
    kind = (play.play_type or "").lower()
    return "touchdown" in kind or "field goal good" in kind or "safety" in kind


def _play_line(play: Play) -> str:
    quarter = f"Q{play.period}" if play.period is not None else "Q?"
    clock = ""
    if play.clock is not None and play.clock.minutes is not None:
        clock = f" {play.clock.minutes}:{(play.clock.seconds or 0):02d}"
    offense = f"{play.offense}: " if play.offense else ""
    line = f"{quarter}{clock} - {offense}{play.play_text or play.play_type or 'No description'}"
    if play.offense_score is not None and play.defense_score is not None:
        line += f" ({play.offense_score}-{play.defense_score})"
    return line


def format_play_by_play(payload: Any, game_id: int, limit: int = 20) -> str:
    plays = decode_list(Play, payload)
    if not plays:
        return f"No plays found for game {game_id}"

    scoring = [p for p in plays if _is_scoring(p)]
    if scoring:
        text = f"🏈 GAME {game_id} SCORING PLAYS\n\n"
        selected = scoring
    else:
        selected = plays[:limit]
        text = f"🏈 GAME {game_id} FIRST {len(selected)} PLAYS (no scoring plays recorded)\n\n"
    text += "\n".join(_play_line(p) for p in selected) + "\n"
    return text


# ---------------------------------------------------------------------------
# get_conference_standings / get_team_records
# ---------------------------------------------------------------------------

def _pct(wins: int, losses: int, ties: int = 0) -> float:
    played = wins + losses + ties
    return (wins + 0.5 * ties) / played if played else 0.0


def format_standings(payload: Any, conference: str, year: int) -> str:
    records = [r for r in decode_list(TeamRecord, payload) if r.team]
    if not records:
        return f"No standings found for {conference} in {year}"

    def sort_key(record: TeamRecord):
        conf = record.conference_games
        total = record.total
        conf_pct = _pct(conf.wins or 0, conf.losses or 0, conf.ties or 0) if conf else 0.0
        total_wins = (total.wins or 0) if total else 0
        return (-conf_pct, -total_wins, record.team)

    text = header("STANDINGS", conference, year)
    for rank, record in enumerate(sorted(records, key=sort_key), start=1):
        total = record.total
        line = f"{rank}. {record.team} ("
        line += win_loss(total.wins, total.losses, total.ties) if total else "N/A"
        conf = record.conference_games
        if conf is not None and conf.wins is not None:
            line += f", conf {win_loss(conf.wins, conf.losses, conf.ties)}"
        text += line + ")\n"
    return text


def format_team_records(payload: Any, team: str, start_year: int, end_year: int) -> str:
    records = sorted(
        (
            r for r in decode_list(TeamRecord, payload)
            if r.year is not None and start_year <= r.year <= end_year and r.total is not None
        ),
        key=lambda r: r.year,
    )
    if not records:
        return f"No records found for {team} between {start_year} and {end_year}"

    text = header("RECORDS", team, f"{start_year}-{end_year}")
    wins = losses = ties = 0
    for record in records:
        total = record.total
        wins += total.wins or 0
        losses += total.losses or 0
        ties += total.ties or 0
        line = f"{record.year}: {win_loss(total.wins, total.losses, total.ties)}"
        conf = record.conference_games
        if conf is not None and conf.wins is not None:
            line += f" (Conf: {win_loss(conf.wins, conf.losses, conf.ties)})"
        text += line + "\n"

    text += f"\nTotal ({len(records)} seasons): {win_loss(wins, losses, ties)}"
    text += f" ({_pct(wins, losses, ties) * 100:.1f}%)\n"
    return text


# ---------------------------------------------------------------------------
# get_team_rankings
# ---------------------------------------------------------------------------

def format_rankings(payload: Any, team: str, year: int) -> str:
    weeks = [w for w in decode_list(RankingWeek, payload) if w.polls]
    if not weeks:
        return f"No rankings found for {team} in {year}"

    final = max(weeks, key=lambda w: ((w.season_type or "").lower() == "postseason", w.week or 0))
    label = "final postseason" if (final.season_type or "").lower() == "postseason" else f"week {final.week}"

    lines = []
    school = None
    for poll in final.polls:
        entry = next((r for r in poll.ranks if same_team(r.school, team)), None)
        if entry is None:
            continue
        school = entry.school
        line = f"  {poll.poll or 'Poll'}: #{entry.rank if entry.rank is not None else '?'}"
        details = []
        if entry.first_place_votes:
            details.append(f"{entry.first_place_votes} first-place votes")
        if entry.points is not None:
            details.append(f"{entry.points:,} points")
        if details:
            line += f" ({', '.join(details)})"
        lines.append(line)

    if not lines:
        return f"{team} was not ranked in any {year} poll ({label})"
    return header("RANKINGS", school or team, year) + f"Polls ({label}):\n" + "\n".join(lines) + "\n"


# ---------------------------------------------------------------------------
# get_team_talent
# ---------------------------------------------------------------------------

def format_talent(payload: Any, team: str, year: int) -> str:
    rows = [r for r in decode_list(TeamTalent, payload) if r.team and r.talent is not None]
    if not rows:
        return f"No talent composite data available for any team in {year}"

    ranked = sorted(rows, key=lambda r: (-r.talent, r.team))
    position = next((i for i, r in enumerate(ranked, start=1) if same_team(r.team, team)), None)
    if position is None:
        return f"No talent composite rating found for {team} in {year} ({len(ranked)} teams rated)"

    entry = ranked[position - 1]
    text = header("TALENT COMPOSITE", entry.team, year)
    text += f"Talent Rating: {entry.talent:.2f}\n"
    text += f"National Rank: #{position} of {len(ranked)}\n"
    return text


# ---------------------------------------------------------------------------
# get_venue_info
# ---------------------------------------------------------------------------

def find_venue(venues: List[Venue], team: str) -> Optional[Venue]:
    needle = team.strip().lower()
    for venue in venues:
        if venue.name and needle in venue.name.lower():
            return venue
    for venue in venues:
        if venue.city and needle == venue.city.lower():
            return venue
    return None


def format_venue(payload: Any, team: str) -> str:
    venues = decode_list(Venue, payload)
    if not venues:
        return f"No venue data found for {team}"

    venue = find_venue(venues, team)
    if venue is None:
        return (
            f"No venue found matching '{team}'. Venues are matched by stadium name or "
            "city, so try part of the stadium name (e.g. 'memorial') or the city (e.g. 'norman')."
        )

    text = header("VENUE", venue.name or team)
    location = ", ".join(part for part in (venue.city, venue.state) if part)
    text += f"Location: {location or 'N/A'}\n"
    text += f"Capacity: {number(venue.capacity)}\n"
    if venue.grass is None:
        surface = "Unknown"
    else:
        surface = "Grass" if venue.grass else "Artificial turf"
    text += f"Surface: {surface}\n"
    text += f"Dome: {'Unknown' if venue.dome is None else ('Yes' if venue.dome else 'No')}\n"
    if venue.year_constructed is not None:
        text += f"Opened: {venue.year_constructed}\n"
    if venue.elevation is not None:
        text += f"Elevation: {number(venue.elevation)} ft\n"
    return text


# ---------------------------------------------------------------------------
# get_returning_production
# ---------------------------------------------------------------------------

def format_returning_production(payload: Any, team: str, year: int) -> str:
    rows = decode_list(ReturningProduction, payload)
    entry = next((r for r in rows if same_team(r.team, team)), rows[0] if rows else None)
    if entry is None:
        return f"No returning production data found for {team} in {year}"

    categories = [
        ("Overall", entry.percent_ppa),
        ("Passing", entry.percent_passing_ppa),
        ("Rushing", entry.percent_rushing_ppa),
        ("Receiving", entry.percent_receiving_ppa),
    ]
    if all(value is None for _, value in categories):
        return (
            f"Returning production data for {team} in {year} is incomplete. "
            "CFBD's returning-production numbers are spotty for some programs and "
            "seasons, and are usually filled in a few weeks after the transfer window closes."
        )

    text = header("RETURNING PRODUCTION", team, year)
    text += "Percent of production (PPA) returning:\n"
    text += "\n".join(f"  {label}: {percent(value)}" for label, value in categories) + "\n"

    usage = [
        ("Overall", entry.usage),
        ("Passing", entry.passing_usage),
        ("Rushing", entry.rushing_usage),
        ("Receiving", entry.receiving_usage),
    ]
    if any(value is not None for _, value in usage):
        text += "\nPercent of usage returning:\n"
        text += "\n".join(f"  {label}: {percent(value)}" for label, value in usage) + "\n"

    missing = [label for label, value in categories if value is None]
    if missing:
        text += f"\nNote: CFBD did not report {', '.join(missing).lower()} figures; data is spotty for this team/season.\n"
    return text


# ---------------------------------------------------------------------------
# get_team_matchup
# ---------------------------------------------------------------------------

def series_summary(name1: str, name2: str, wins1: int, wins2: int, ties: int) -> str:
    tail = f"-{ties}" if ties else ""
    if wins1 > wins2:
        return f"{name1} leads {wins1}-{wins2}{tail}"
    if wins2 > wins1:
        return f"{name2} leads {wins2}-{wins1}{tail}"
    return f"Series tied {wins1}-{wins2}{tail}"


def format_matchup(payload: Any, team1: str, team2: str, min_year: int) -> str:
    if isinstance(payload, list):
        payload = payload[0] if payload else None
    matchup = decode_one(Matchup, payload)
    if matchup is None or (
        not matchup.games and not (matchup.team1_wins or matchup.team2_wins or matchup.ties)
    ):
        return f"No games found between {team1} and {team2} since {min_year}"

    name1 = matchup.team1 or team1
    name2 = matchup.team2 or team2
    span = f"{matchup.start_year or min_year}-{matchup.end_year}" if matchup.end_year else f"since {min_year}"
    text = f"🏈 {name1.upper()} vs {name2.upper()} ({span})\n\n"
    text += "Series: " + series_summary(
        name1, name2, matchup.team1_wins or 0, matchup.team2_wins or 0, matchup.ties or 0
    ) + "\n"

    recent = sorted(matchup.games, key=lambda g: (g.season or 0, g.week or 0), reverse=True)[:10]
    if recent:
        text += "\nMost recent games:\n"
        for game in recent:
            line = f"  {game.season or '?'}: {game.away_team} {game.away_score if game.away_score is not None else '-'}"
            line += " vs " if game.neutral_site else " @ "
            line += f"{game.home_team} {game.home_score if game.home_score is not None else '-'}"
            if game.winner:
                line += f" ({game.winner} won)"
            text += line + "\n"
    return text
