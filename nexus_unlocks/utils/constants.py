DATE_FORMAT = '%Y-%m-%d'
MONTH_FORMAT = '%Y-%m'

# Level curve
BASE_XP = 100
GROWTH_RATE = 1.5

RANK_TITLES = [
    (50, 'Lenda'),
    (30, 'Magnata'),
    (20, 'Estrategista'),
    (10, 'Analista'),
    (5, 'Explorador'),
    (1, 'Novato'),
]

# Achievement tiers (independent, not mutually exclusive)
VOLUME_TIERS = [1, 10, 50, 100, 250, 500, 1000, 2500, 5000, 10000]
WEALTH_TIERS = [1000, 5000, 10000, 50000, 100000, 250000, 500000, 1000000]
STREAK_TIERS = [3, 7, 14, 21, 30, 60, 90, 180, 365]
SCORE_TIERS = [25, 50, 100, 250, 500, 1000]
CATEGORY_COUNT_TIERS = [1, 5, 10, 25, 50, 100, 250, 500]
CATEGORY_VALUE_TIERS = [500, 1000, 5000, 10000, 50000, 100000]

# Category ids that get specialisation/patronage tiers: (id, name, icon)
TRACKED_CATEGORIES = [
    ('cat_1', 'Moradia', 'home'),
    ('cat_2', 'Alimentação', 'utensils'),
    ('cat_3', 'Transporte', 'car'),
    ('cat_4', 'Saúde', 'activity'),
    ('cat_5', 'Lazer', 'party-popper'),
    ('cat_6', 'Assinaturas', 'credit-card'),
    ('cat_7', 'Educação', 'graduation-cap'),
    ('cat_8', 'Investimentos', 'trending-up'),
    ('cat_tech', 'Tecnologia', 'monitor'),
    ('cat_games', 'Games', 'gamepad'),
]

# Income category excluded from the "activity" volume count
SALARY_CATEGORY = 'Salário'
EXTRA_INCOME_CATEGORY = 'Renda Extra'

# Bus topics
STATE_CHANGED = 'state-changed'
VIEW_OPENED = 'view-opened'
UNLOCK_GRANTED = 'unlock-granted'

REPORT_VIEW = 'report'

# Money comparisons
AMOUNT_EPSILON = 0.01
