"""Fixed category enumeration and grouped roll-ups."""

WORK = "work"
PLAY = "play"
UCLA = "UCLA"
EXERCISE = "exercise"
SOCIAL = "social"
WIS_PRODUCTION = "WiS production"
STAND_UP_PRODUCTION = "stand-up production"
FAMILY = "family"
JOB_SEARCH = "job search"
PERSONAL_WRITING = "personal writing"
PERSONAL_DEVELOPMENT = "personal development"
ERRANDS_CHORES = "errands/chores"
DECISION_STRESS = "decision stress"
MISCELLANEOUS = "miscellaneous"

# Superseded by WiS production / stand-up production.
BUSINESS_PLANNING = "business planning"
COMEDY = "comedy"

CATEGORIES = (
    WORK,
    PLAY,
    UCLA,
    EXERCISE,
    SOCIAL,
    WIS_PRODUCTION,
    STAND_UP_PRODUCTION,
    FAMILY,
    JOB_SEARCH,
    PERSONAL_WRITING,
    PERSONAL_DEVELOPMENT,
    ERRANDS_CHORES,
    DECISION_STRESS,
    MISCELLANEOUS,
)

GROUPS = {
    "creative": (UCLA, PLAY, STAND_UP_PRODUCTION, PERSONAL_WRITING),
    "self-care": (EXERCISE, SOCIAL, PERSONAL_DEVELOPMENT),
    "productive": (WORK, WIS_PRODUCTION, JOB_SEARCH),
    "family": (FAMILY,),
    "maintenance": (ERRANDS_CHORES, DECISION_STRESS),
}
