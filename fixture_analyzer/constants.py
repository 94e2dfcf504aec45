"""Centralized constants for the fixture analyzer."""

# ---- League home advantage (API-Football league ids) ----
HOME_ADVANTAGE_BY_LEAGUE = {
    39: 0.15,    # Premier League
    140: 0.12,   # La Liga
    78: 0.18,    # Bundesliga
    135: 0.10,   # Serie A
    61: 0.08,    # Ligue 1
}
DEFAULT_HOME_ADVANTAGE = 0.12  # Unlisted leagues

# Windows
FORM_LENGTH = 5          # Results shown in a form sequence
FORM_PLACEHOLDER = "-"
H2H_WINDOW = 10          # Head-to-head matches tallied
H2H_DISPLAY_LIMIT = 5    # Raw head-to-head entries echoed in the record
FIXTURES_BATCH_LIMIT = 15
FORM_FETCH_LAST = 10     # Matches requested per team from the provider

# Form score weights
FORM_WIN_WEIGHT = 0.3
FORM_NOT_LOST_WEIGHT = 0.2

# Strength weights
STRENGTH_FORM_WEIGHT = 0.5
STRENGTH_H2H_WEIGHT = 0.3
STRENGTH_HOME_ADVANTAGE_WEIGHT = 0.2

# Recommendation thresholds (percentage points)
WIN_MARGIN = 15
WIN_FLOOR = 45
DRAW_FLOOR = 35
DRAW_MAX_GAP = 10
WIN_CONFIDENCE_CAP = 95
DRAW_CONFIDENCE_CAP = 90

# Neutral split used when neither side has any strength
NEUTRAL_PROBABILITY = 100 / 3

# Advisory thresholds
HEAVY_SCORING_GOALS = 2.0
LEAKY_DEFENCE_GOALS = 1.5
H2H_DOMINANCE_FACTOR = 2

# Recommendation labels
HOME_WIN = "HOME WIN"
DRAW = "DRAW"
AWAY_WIN = "AWAY WIN"
DATA_UNAVAILABLE = "DATA UNAVAILABLE"

# Advice sentences
ADVICE_HOME_WIN = "Strong home advantage and positive H2H record."
ADVICE_AWAY_WIN = "Away team in superior form."
ADVICE_DRAW = "Evenly matched teams with similar form."
ADVICE_SLIGHT_EDGE = "Slight edge to this team based on recent form."
ADVICE_HOME_SCORING = "Home team scoring heavily recently."
ADVICE_AWAY_LEAKY = "Away team struggling defensively."
ADVICE_H2H_DOMINANCE = "Strong historical advantage for home team."
ADVICE_UNAVAILABLE = "Historical data could not be loaded"

# Transport
FIXTURES_CACHE_CONTROL = "public, s-maxage=300, stale-while-revalidate=600"
NO_FIXTURES_MESSAGE = "No fixtures found for this date"

# ---- Logging ----
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_FILE_NAME = "fixture_analyzer.log"
LOG_FILE_MAX_BYTES = 5 * 1024 * 1024
LOG_FILE_BACKUPS = 3
