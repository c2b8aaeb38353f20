from __future__ import annotations

from dataclasses import dataclass

from nexus_unlocks.achievements.catalog import ALL_ACHIEVEMENTS
from nexus_unlocks.models.progress import ProgressState
from nexus_unlocks.utils.helper import calculate_level


@dataclass(frozen=True)
class Badge:
    id: str
    name: str
    description: str
    icon: str
    unlock_criteria: str


NEXUS_BADGES = [
    Badge('badge_newbie', 'Iniciado', 'Bem-vindo ao Nexus Hub.', 'zap', 'Instalar o plugin.'),  # noqa: E501
    Badge('badge_saver', 'Poupador', 'Mestre da economia.', 'piggy-bank', 'Atingir Nível 5.'),  # noqa: E501
    Badge('badge_investor', 'Investidor', 'Fazendo o dinheiro trabalhar.', 'trending-up', 'Atingir Nível 10.'),  # noqa: E501
    Badge('badge_tycoon', 'Magnata', 'No topo do mundo financeiro.', 'crown', 'Atingir Nível 20.'),  # noqa: E501
    Badge('badge_collector', 'Colecionador', 'Amante de raridades.', 'layers', 'Coletar 10 Cartas Únicas.'),  # noqa: E501
    Badge('badge_guardian', 'Guardião', 'Protetor da reserva.', 'shield', 'Fundo de Emergência Completo.'),  # noqa: E501
    Badge('badge_legend', 'Lenda', 'Conquiste tudo.', 'star', 'Todas as conquistas desbloqueadas.'),  # noqa: E501
]

LEGEND_ACHIEVEMENTS = 50


def total_points(state: ProgressState) -> int:
    '''Sum of achievement points, looked up in the achievement catalog.'''
    points = {d.id: int(d.reward.get('points', 0)) for d in ALL_ACHIEVEMENTS}
    return sum(points.get(ach_id, 0) for ach_id in state.achievements)


def is_badge_unlocked(badge_id: str, state: ProgressState) -> bool:
    '''Badges are derived from state on every read, never granted.'''
    level = calculate_level(total_points(state))
    fund = state.emergency_fund
    fund_complete = fund.current_balance > 0 and fund.current_balance >= (
        fund.target_amount or 1
    )

    checks = {
        'badge_newbie': True,
        'badge_saver': level >= 5,
        'badge_investor': level >= 10,
        'badge_tycoon': level >= 20,
        'badge_collector': len(set(state.collected_cards)) >= 10,
        'badge_guardian': fund_complete,
        'badge_legend': len(state.achievements) >= LEGEND_ACHIEVEMENTS,
    }
    return checks.get(badge_id, False)


def unlocked_badges(state: ProgressState) -> list[Badge]:
    return [b for b in NEXUS_BADGES if is_badge_unlocked(b.id, state)]
