"""Canned CFBD payloads shaped like the real API responses."""

GAMES = [
    {"id": 401628319, "season": 2024, "week": 1, "start_date": "2024-08-30T23:00:00.000Z",
     "neutral_site": False, "home_team": "Oklahoma", "home_points": 51, "away_team": "Temple", "away_points": 3},
    {"id": 401628330, "season": 2024, "week": 2, "start_date": "2024-09-07T00:00:00.000Z",
     "neutral_site": False, "home_team": "Oklahoma", "home_points": 16, "away_team": "Houston", "away_points": 12},
    {"id": 401628345, "season": 2024, "week": 4, "start_date": "2024-09-21T23:30:00.000Z",
     "neutral_site": False, "home_team": "Oklahoma", "home_points": 19, "away_team": "Tennessee", "away_points": 25},
    {"id": 401628360, "season": 2024, "week": 7, "start_date": "2024-10-12T19:30:00.000Z",
     "neutral_site": True, "home_team": "Texas", "home_points": 34, "away_team": "Oklahoma", "away_points": 3},
    {"id": 401628371, "season": 2024, "week": 9, "start_date": "2024-10-26T16:00:00.000Z",
     "neutral_site": False, "home_team": "Ole Miss", "home_points": 26, "away_team": "Oklahoma", "away_points": 14},
]

UPCOMING = [
    {"id": 401752001, "season": 2025, "week": 1, "start_date": "2025-08-30T23:00:00.000Z",
     "neutral_site": False, "home_team": "Oklahoma", "home_points": None, "away_team": "Illinois State",
     "away_points": None},
]

BOX_SCORE = [
    {
        "id": 401628360,
        "teams": [
            {"school": "Texas", "homeAway": "home", "points": 34, "stats": [
                {"category": "totalYards", "stat": "426"},
                {"category": "turnovers", "stat": "1"},
                {"category": "thirdDownEff", "stat": "7-14"},
            ]},
            {"school": "Oklahoma", "homeAway": "away", "points": 3, "stats": [
                {"category": "totalYards", "stat": "237"},
                {"category": "turnovers", "stat": "3"},
                {"category": "possessionTime", "stat": "27:01"},
            ]},
        ],
    }
]

PLAYER_STATS = [
    {"player": "Jackson Arnold", "team": "Oklahoma", "category": "passing", "statType": "YDS", "stat": "1421"},
    {"player": "Jackson Arnold", "team": "Oklahoma", "category": "passing", "statType": "TD", "stat": "12"},
    {"player": "Michael Hawkins Jr.", "team": "Oklahoma", "category": "passing", "statType": "YDS", "stat": "783"},
    {"player": "Michael Hawkins Jr.", "team": "Oklahoma", "category": "passing", "statType": "TD", "stat": "2"},
    {"player": "Jackson Arnold", "team": "Oklahoma", "category": "rushing", "statType": "YDS", "stat": "442"},
    {"player": "Jovantae Barnes", "team": "Oklahoma", "category": "rushing", "statType": "YDS", "stat": "658"},
    {"player": "Jovantae Barnes", "team": "Oklahoma", "category": "rushing", "statType": "CAR", "stat": 148},
]

TEAM_STATS = [
    {"season": 2024, "team": "Oklahoma", "statName": "games", "statValue": 13},
    {"season": 2024, "team": "Oklahoma", "statName": "totalYards", "statValue": 4083},
    {"season": 2024, "team": "Oklahoma", "statName": "turnovers", "statValue": 19},
    {"season": 2024, "team": "Oklahoma", "statName": "kickReturns", "statValue": 22},
]

RECRUITING = [{"year": 2025, "rank": 14, "team": "Oklahoma", "points": 282.43}]

PLAYS = [
    {"offense": "Oklahoma", "defense": "Temple", "period": 1, "clock": {"minutes": 12, "seconds": 5},
     "offenseScore": 0, "defenseScore": 0, "playType": "Rush", "playText": "Barnes run for 4 yds"},
    {"offense": "Oklahoma", "defense": "Temple", "period": 1, "clock": {"minutes": 9, "seconds": 41},
     "offenseScore": 7, "defenseScore": 0, "playType": "Passing Touchdown",
     "playText": "Arnold pass complete to Burks for 25 yds for a TD"},
    {"offense": "Temple", "defense": "Oklahoma", "period": 2, "clock": {"minutes": 0, "seconds": 3},
     "offenseScore": 3, "defenseScore": 21, "playType": "Field Goal Good", "playText": "Mahoney 38 yd FG GOOD"},
]

STANDINGS = [
    {"year": 2024, "team": "Georgia", "conference": "SEC",
     "total": {"games": 14, "wins": 11, "losses": 3, "ties": 0},
     "conferenceGames": {"games": 8, "wins": 6, "losses": 2, "ties": 0}},
    {"year": 2024, "team": "Texas", "conference": "SEC",
     "total": {"games": 16, "wins": 13, "losses": 3, "ties": 0},
     "conferenceGames": {"games": 8, "wins": 7, "losses": 1, "ties": 0}},
    {"year": 2024, "team": "Oklahoma", "conference": "SEC",
     "total": {"games": 13, "wins": 6, "losses": 7, "ties": 0},
     "conferenceGames": {"games": 8, "wins": 2, "losses": 6, "ties": 0}},
]

RANKINGS = [
    {"season": 2024, "seasonType": "regular", "week": 14, "polls": [
        {"poll": "AP Top 25", "ranks": [
            {"rank": 1, "school": "Oregon", "firstPlaceVotes": 62, "points": 1550},
            {"rank": 9, "school": "Oklahoma", "firstPlaceVotes": 0, "points": 900},
        ]},
    ]},
    {"season": 2024, "seasonType": "postseason", "week": 1, "polls": [
        {"poll": "AP Top 25", "ranks": [
            {"rank": 1, "school": "Ohio State", "firstPlaceVotes": 60, "points": 1550},
            {"rank": 3, "school": "Texas", "firstPlaceVotes": 2, "points": 1380},
        ]},
        {"poll": "Coaches Poll", "ranks": [
            {"rank": 4, "school": "Texas", "firstPlaceVotes": 0, "points": 1201},
        ]},
    ]},
]

TALENT = [
    {"year": 2024, "school": "Georgia", "talent": 1015.2},
    {"year": 2024, "school": "Alabama", "talent": 1002.6},
    {"year": 2024, "school": "Oklahoma", "talent": 897.51},
]

RECORDS = [
    {"year": 2021, "team": "Oklahoma", "total": {"games": 13, "wins": 11, "losses": 2, "ties": 0},
     "conferenceGames": {"games": 9, "wins": 7, "losses": 2, "ties": 0}},
    {"year": 2022, "team": "Oklahoma", "total": {"games": 13, "wins": 6, "losses": 7, "ties": 0},
     "conferenceGames": {"games": 9, "wins": 3, "losses": 6, "ties": 0}},
    {"year": 2023, "team": "Oklahoma", "total": {"games": 13, "wins": 10, "losses": 3, "ties": 0},
     "conferenceGames": {"games": 9, "wins": 7, "losses": 2, "ties": 0}},
]

VENUES = [
    {"id": 3755, "name": "Darrell K Royal-Texas Memorial Stadium", "capacity": 100119, "grass": False,
     "city": "Austin", "state": "TX", "dome": False, "year_constructed": 1924},
    {"id": 3737, "name": "Gaylord Family Oklahoma Memorial Stadium", "capacity": 80126, "grass": True,
     "city": "Norman", "state": "OK", "elevation": 357.8, "dome": False, "year_constructed": 1923},
]

RETURNING = [
    {"season": 2025, "team": "Oklahoma", "conference": "SEC", "totalPPA": 112.3, "percentPPA": 0.412,
     "percentPassingPPA": 0.05, "percentRushingPPA": 0.667, "percentReceivingPPA": 0.38,
     "usage": 0.44, "passingUsage": 0.05, "rushingUsage": 0.7, "receivingUsage": 0.41},
]

MATCHUP = {
    "team1": "Oklahoma", "team2": "Texas", "startYear": 2017, "endYear": 2024,
    "team1Wins": 5, "team2Wins": 3, "ties": 0,
    "games": [
        {"season": 2024, "week": 7, "neutralSite": True, "homeTeam": "Texas", "homeScore": 34,
         "awayTeam": "Oklahoma", "awayScore": 3, "winner": "Texas"},
        {"season": 2023, "week": 6, "neutralSite": True, "homeTeam": "Oklahoma", "homeScore": 34,
         "awayTeam": "Texas", "awayScore": 30, "winner": "Oklahoma"},
    ],
}
