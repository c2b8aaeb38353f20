from __future__ import annotations

from nexus_unlocks.models.unlockable import Rarity, UnlockableDefinition, UnlockKind
from nexus_unlocks.utils.constants import (
    CATEGORY_COUNT_TIERS,
    CATEGORY_VALUE_TIERS,
    SCORE_TIERS,
    STREAK_TIERS,
    TRACKED_CATEGORIES,
    VOLUME_TIERS,
    WEALTH_TIERS,
)

ONBOARDING = 'Iniciação'
VOLUME = 'Volume'
WEALTH = 'Patrimônio'
DISCIPLINE = 'Disciplina'
SCORE = 'Nexus Score'
SPECIALIZATION = 'Especialização'
PATRONAGE = 'Patronato'
MYSTERY = 'Mistério'
HABITS = 'Hábitos'
LIFESTYLE = 'Lifestyle'
EASTER_EGG = 'Easter Egg'

CAPSTONE_SLUGS = {
    ONBOARDING: 'onboarding',
    VOLUME: 'volume',
    WEALTH: 'wealth',
    DISCIPLINE: 'discipline',
    SCORE: 'score',
    SPECIALIZATION: 'specialization',
    PATRONAGE: 'patronage',
    MYSTERY: 'mystery',
    HABITS: 'habits',
    LIFESTYLE: 'lifestyle',
    EASTER_EGG: 'easter_egg',
}

TIER_RARITY = {
    'Bronze': Rarity.COMMON,
    'Silver': Rarity.UNCOMMON,
    'Gold': Rarity.RARE,
    'Platinum': Rarity.EPIC,
    'Diamond': Rarity.LEGENDARY,
}


def achievement(
    id: str,
    name: str,
    description: str,
    icon: str,
    tier: str,
    points: int,
    category: str,
    capstone: bool = False,
) -> UnlockableDefinition:
    return UnlockableDefinition(
        id=id,
        name=name,
        description=description,
        kind=UnlockKind.ACHIEVEMENT,
        category=category,
        rarity=TIER_RARITY[tier],
        reward={'icon': icon, 'tier': tier, 'points': points},
        capstone=capstone,
    )


def capstone_id(category: str) -> str:
    return f'capstone_{CAPSTONE_SLUGS[category]}'


def _tier(n: int, gold: int, platinum: int, top: str = 'Platinum') -> str:
    if n >= platinum:
        return top
    return 'Gold' if n >= gold else 'Silver'


def _onboarding() -> list[UnlockableDefinition]:
    return [
        achievement('first_steps', 'Primeiros Passos', 'Complete a configuração inicial.', 'flag', 'Bronze', 10, ONBOARDING),  # noqa: E501
        achievement('identity_set', 'Identidade Definida', 'Defina seu nome e avatar.', 'user', 'Bronze', 5, ONBOARDING),  # noqa: E501
        achievement('first_credit_card', 'Plástico', 'Cadastre seu primeiro cartão de crédito.', 'credit-card', 'Bronze', 10, ONBOARDING),  # noqa: E501
        achievement('two_cards', 'Carteira Cheia', 'Cadastre dois cartões de crédito.', 'wallet', 'Silver', 20, ONBOARDING),  # noqa: E501
        achievement('first_report_view', 'Analista', 'Abra o relatório mensal.', 'bar-chart', 'Bronze', 10, ONBOARDING),  # noqa: E501
    ]


def _volume() -> list[UnlockableDefinition]:
    return [
        achievement(
            f'total_tx_{n}',
            f'Lenda do Registro {n}',
            f'Registre {n} transações no total.',
            'list',
            _tier(n, 100, 1000),
            n // 2,
            VOLUME,
        )
        for n in VOLUME_TIERS
    ]


def _wealth() -> list[UnlockableDefinition]:
    return [
        achievement(
            f'wealth_{n}',
            f'Barão {n // 1000}k',
            f'Acumule R$ {n} em patrimônio (Saldo + Investimentos).',
            'briefcase',
            'Diamond' if n >= 100000 else ('Platinum' if n >= 10000 else 'Gold'),
            n // 500,
            WEALTH,
        )
        for n in WEALTH_TIERS
    ]


def _streaks() -> list[UnlockableDefinition]:
    return [
        achievement(
            f'streak_{n}',
            f'Foco Supremo {n} Dias',
            f'Acesse o Nexus Hub por {n} dias consecutivos.',
            'flame',
            'Diamond' if n >= 90 else ('Platinum' if n >= 30 else 'Gold'),
            n * 5,
            DISCIPLINE,
        )
        for n in STREAK_TIERS
    ]


def _score() -> list[UnlockableDefinition]:
    return [
        achievement(
            f'nexus_score_{n}',
            f'Pontuação {n}',
            f'Alcance {n} pontos de Nexus Score.',
            'zap',
            _tier(n, 100, 500),
            n // 5,
            SCORE,
        )
        for n in SCORE_TIERS
    ]


def _categories() -> list[UnlockableDefinition]:
    items: list[UnlockableDefinition] = []
    for cat_id, cat_name, icon in TRACKED_CATEGORIES:
        for count in CATEGORY_COUNT_TIERS:
            items.append(
                achievement(
                    f'cat_{cat_id}_count_{count}',
                    f'Especialista em {cat_name} {count}',
                    f'Registre {count} despesas em {cat_name}.',
                    icon,
                    'Gold' if count >= 100 else ('Silver' if count >= 25 else 'Bronze'),  # noqa: E501
                    count * 2,
                    SPECIALIZATION,
                )
            )
        for value in CATEGORY_VALUE_TIERS:
            items.append(
                achievement(
                    f'cat_{cat_id}_val_{value}',
                    f'Investidor em {cat_name} {value / 1000:g}k',
                    f'Gaste um total de R$ {value} em {cat_name}.',
                    'dollar-sign',
                    'Platinum' if value >= 50000 else ('Gold' if value >= 5000 else 'Silver'),  # noqa: E501
                    value // 100,
                    PATRONAGE,
                )
            )
    return items


def _mystery() -> list[UnlockableDefinition]:
    return [
        achievement('rng_199', 'Promoção', 'Transação de R$ 1,99.', 'tag', 'Bronze', 10, MYSTERY),  # noqa: E501
        achievement('rng_12345', 'Sequência', 'Transação de R$ 123,45.', 'list-ordered', 'Silver', 50, MYSTERY),  # noqa: E501
        achievement('rng_314', 'Pi', 'Transação de R$ 3,14.', 'divide', 'Bronze', 31, MYSTERY),  # noqa: E501
        achievement('rng_42', 'A Resposta', 'Transação de R$ 42,00.', 'help-circle', 'Silver', 42, MYSTERY),  # noqa: E501
        achievement('rng_777', 'Jackpot', 'Transação de R$ 777,00.', 'coins', 'Gold', 77, MYSTERY),  # noqa: E501
        achievement('rng_1001', 'Mil e Uma Noites', 'Transação de R$ 1.001,00.', 'moon', 'Silver', 50, MYSTERY),  # noqa: E501
        achievement('rng_001', 'Centavinho', 'Transação de R$ 0,01.', 'circle', 'Bronze', 5, MYSTERY),  # noqa: E501
        achievement('rng_888', 'Infinito', 'Transação de R$ 888,00.', 'infinity', 'Gold', 88, MYSTERY),  # noqa: E501
        achievement('rng_9999', 'Quase 100', 'Transação de R$ 99,99.', 'tag', 'Bronze', 10, MYSTERY),  # noqa: E501
        achievement('rng_5050', 'Metade', 'Transação de R$ 50,50.', 'percent', 'Bronze', 15, MYSTERY),  # noqa: E501
        achievement('rng_1337', 'Elite Hacker', 'Transação de R$ 1337,00.', 'terminal', 'Gold', 137, MYSTERY),  # noqa: E501
        achievement('secret_negative', '???', 'Registre uma despesa negativa (estorno?).', 'help-circle', 'Gold', 50, MYSTERY),  # noqa: E501
        achievement('secret_rich', 'Elon Musk?', 'Registre uma receita de R$ 1.000.000,00.', 'rocket', 'Diamond', 500, MYSTERY),  # noqa: E501
        achievement('secret_penny', 'Pão Duro', 'Cinco transações de R$ 1,00 ou menos no mesmo dia.', 'lock', 'Silver', 30, MYSTERY),  # noqa: E501
    ]


def _habits() -> list[UnlockableDefinition]:
    return [
        achievement('time_0404', 'Error 404', 'Transação às 04:04 da manhã.', 'alert-triangle', 'Platinum', 100, HABITS),  # noqa: E501
        achievement('time_1200', 'Pontual', 'Transação ao meio-dia em ponto (12:00).', 'watch', 'Silver', 30, HABITS),  # noqa: E501
        achievement('time_2359', 'No Limite', 'Transação às 23:59.', 'hourglass', 'Gold', 50, HABITS),  # noqa: E501
        achievement('time_1620', 'Hora do Chá', 'Transação às 16:20.', 'coffee', 'Bronze', 20, HABITS),  # noqa: E501
        achievement('time_1111', 'Make a Wish', 'Transação às 11:11.', 'star', 'Silver', 30, HABITS),  # noqa: E501
        achievement('time_0000', 'Meia Noite', 'Transação às 00:00.', 'moon', 'Gold', 60, HABITS),  # noqa: E501
        achievement('time_dawn', 'Madrugador', 'Transação entre 03:00 e 05:00.', 'sunrise', 'Silver', 30, HABITS),  # noqa: E501
        achievement('time_lunch', 'Hora do Almoço', 'Transação entre 12:00 e 14:00.', 'utensils', 'Bronze', 10, HABITS),  # noqa: E501
    ]


def _lifestyle() -> list[UnlockableDefinition]:
    return [
        achievement('key_pizza', 'Cowabunga', 'Descrição contém "Pizza".', 'pizza', 'Bronze', 10, LIFESTYLE),  # noqa: E501
        achievement('key_uber', 'Motorista Particular', 'Descrição contém "Uber" ou "99".', 'car', 'Bronze', 10, LIFESTYLE),  # noqa: E501
        achievement('key_steam', 'Gaben', 'Descrição contém "Steam".', 'gamepad', 'Silver', 20, LIFESTYLE),  # noqa: E501
        achievement('key_ifood', 'Tá na Mão', 'Descrição contém "iFood".', 'utensils', 'Bronze', 10, LIFESTYLE),  # noqa: E501
        achievement('key_netflix', 'Maratona', 'Descrição contém "Netflix".', 'tv', 'Bronze', 10, LIFESTYLE),  # noqa: E501
        achievement('key_spotify', 'DJ', 'Descrição contém "Spotify".', 'music', 'Bronze', 10, LIFESTYLE),  # noqa: E501
        achievement('key_gym', 'No Pain No Gain', 'Descrição contém "Academia" ou "Gym".', 'dumbbell', 'Silver', 25, LIFESTYLE),  # noqa: E501
        achievement('key_beer', 'Sextou', 'Descrição contém "Cerveja" ou "Bar".', 'beer', 'Bronze', 15, LIFESTYLE),  # noqa: E501
        achievement('key_book', 'Intelectual', 'Descrição contém "Livro" ou "Kindle".', 'book', 'Silver', 30, LIFESTYLE),  # noqa: E501
        achievement('key_gift', 'Generoso', 'Descrição contém "Presente".', 'gift', 'Silver', 25, LIFESTYLE),  # noqa: E501
        achievement('key_pet', 'Pai de Pet', 'Descrição contém "Ração" ou "Vet".', 'heart', 'Silver', 25, LIFESTYLE),  # noqa: E501
        achievement('key_doctor', 'Checkup', 'Descrição contém "Médico" ou "Exame".', 'activity', 'Silver', 30, LIFESTYLE),  # noqa: E501
    ]


def _easter_eggs() -> list[UnlockableDefinition]:
    return [
        achievement('rng_420', 'Hora do Lanche', 'Transação de R$ 4,20.', 'smile', 'Bronze', 42, EASTER_EGG),  # noqa: E501
        achievement('rng_1990', 'Anos 90', 'Transação de R$ 19,90.', 'cassette-tape', 'Bronze', 19, EASTER_EGG),  # noqa: E501
        achievement('rng_007', 'Espião', 'Transação de R$ 0,07.', 'glasses', 'Silver', 70, EASTER_EGG),  # noqa: E501
        achievement('rng_1010', 'Binário', 'Transação de R$ 10,10.', 'cpu', 'Bronze', 10, EASTER_EGG),  # noqa: E501
        achievement('rng_9000', 'Over 9000', 'Transação de R$ 9.001,00.', 'zap', 'Diamond', 900, EASTER_EGG),  # noqa: E501
        achievement('rng_123', 'Básico', 'Transação de R$ 1,23.', 'hash', 'Bronze', 5, EASTER_EGG),  # noqa: E501
    ]


def _capstones() -> list[UnlockableDefinition]:
    return [
        achievement(
            capstone_id(category),
            f'Platina: {category}',
            f'Desbloqueie todas as outras conquistas de {category}.',
            'trophy',
            'Platinum',
            250,
            category,
            capstone=True,
        )
        for category in CAPSTONE_SLUGS
    ]


ALL_ACHIEVEMENTS: list[UnlockableDefinition] = [
    *_onboarding(),
    *_volume(),
    *_wealth(),
    *_streaks(),
    *_score(),
    *_categories(),
    *_mystery(),
    *_habits(),
    *_lifestyle(),
    *_easter_eggs(),
    *_capstones(),
]
