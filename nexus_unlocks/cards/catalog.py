from __future__ import annotations

from nexus_unlocks.models.unlockable import Rarity, UnlockableDefinition, UnlockKind

WELCOME_CARD = 'card_ledger'


def card(
    id: str,
    name: str,
    description: str,
    rarity: Rarity,
    color: str,
    series: str,
    hint: str,
) -> UnlockableDefinition:
    return UnlockableDefinition(
        id=id,
        name=name,
        description=description,
        kind=UnlockKind.CARD,
        category=series,
        rarity=rarity,
        reward={'color': color, 'unlock_hint': hint},
    )


C, U, R, E, L = (
    Rarity.COMMON,
    Rarity.UNCOMMON,
    Rarity.RARE,
    Rarity.EPIC,
    Rarity.LEGENDARY,
)

NEXUS_TRADING_CARDS: list[UnlockableDefinition] = [
    # Financial Origin
    card('card_ancient_coins', 'Moedas Antigas', 'O começo de toda fortuna.', C, '#a16207', 'Financial Origin', 'Registre 5 despesas na categoria "Alimentação".'),  # noqa: E501
    card('card_ledger', 'O Livro Razão', 'Registros de um império perdido.', C, '#a16207', 'Financial Origin', 'Complete o setup inicial e defina seu nome.'),  # noqa: E501
    card('card_mint', 'A Casa da Moeda', 'Onde o valor é criado.', U, '#a16207', 'Financial Origin', 'Acumule R$ 500,00 em receitas.'),  # noqa: E501
    card('card_banker', 'O Banqueiro', 'Mestre dos juros compostos.', R, '#a16207', 'Financial Origin', 'Mantenha o saldo positivo por 30 dias.'),  # noqa: E501
    # Cyberpunk Ethos
    card('card_data_stream', 'Fluxo de Dados', 'Informação é poder.', C, '#10b981', 'Cyberpunk Ethos', 'Acesse o plugin por 3 dias consecutivos.'),  # noqa: E501
    card('card_subnet', 'Sub-rede Oculta', 'Transações indetectáveis.', U, '#10b981', 'Cyberpunk Ethos', 'Registre uma despesa entre 00:00 e 06:00.'),  # noqa: E501
    card('card_ai_advisor', 'Conselheiro IA', 'Otimizando seus gastos.', R, '#06b6d4', 'Cyberpunk Ethos', 'Complete 3 Metas Financeiras.'),  # noqa: E501
    card('card_surveillance', 'Drone de Vigilância', 'Olhos em todos os lugares.', U, '#10b981', 'Cyberpunk Ethos', 'Veja seu Relatório Mensal 5 vezes.'),  # noqa: E501
    card('card_mainframe', 'O Mainframe', 'O cérebro da operação.', E, '#8b5cf6', 'Cyberpunk Ethos', 'Alcance o Nível 10 de Nexus Score.'),  # noqa: E501
    # Crypto Legends
    card('card_satoshi', 'O Criador', 'Um espectro digital.', L, '#f59e0b', 'Crypto Legends', 'Faça uma transação exata de R$ 21,00.'),  # noqa: E501
    card('card_diamond_hands', 'Mãos de Diamante', 'A paciência é recompensada.', E, '#3b82f6', 'Crypto Legends', 'Economize 20% da sua renda mensal.'),  # noqa: E501
    card('card_bull_run', 'Corrida dos Touros', 'Alta infinita.', R, '#10b981', 'Crypto Legends', 'Aumente sua Renda Extra em 50% num mês.'),  # noqa: E501
    # Luxury Lifestyle
    card('card_private_jet', 'Jato Particular', 'O céu não é o limite.', L, '#ec4899', 'Luxury Lifestyle', 'Registre uma despesa única acima de R$ 5.000,00.'),  # noqa: E501
    card('card_yacht', 'Super Iate', 'Liberdade em alto mar.', E, '#ec4899', 'Luxury Lifestyle', 'Tenha mais de R$ 10.000,00 na Reserva.'),  # noqa: E501
    card('card_penthouse', 'Cobertura', 'Vista do topo.', R, '#ec4899', 'Luxury Lifestyle', 'Pague todas as contas do mês antes do vencimento.'),  # noqa: E501
    # Artifacts
    card('card_golden_calc', 'Calculadora Dourada', 'Soma sempre a seu favor.', L, '#fbbf24', 'Artifacts', 'Tenha exatos R$ 0,00 de saldo no fim do mês.'),  # noqa: E501
    card('card_abacus', 'Ábaco Eterno', 'Calculando desde 3000 A.C.', R, '#78350f', 'Artifacts', 'Registre 50 Transações no total.'),  # noqa: E501
    card('card_scroll', 'Pergaminho Mercantil', 'Contratos inquebráveis.', U, '#fcd34d', 'Artifacts', 'Crie um orçamento para todas as categorias.'),  # noqa: E501
    card('card_kings_coin', 'Moeda do Rei', 'Aceita em qualquer reino.', E, '#ef4444', 'Artifacts', 'Atingir Nível 20.'),  # noqa: E501
    # Medieval Fortune
    card('card_chest', 'Baú de Madeira', 'Segurança rústica.', C, '#854d0e', 'Medieval Fortune', 'Crie um Fundo de Emergência.'),  # noqa: E501
    card('card_shield', 'Escudo do Tesouro', 'Proteção contra gastos.', U, '#94a3b8', 'Medieval Fortune', 'Não gaste nada em "Lazer" por 1 semana.'),  # noqa: E501
    card('card_crown', 'Coroa de Ouro', 'Para quem governa o dinheiro.', L, '#facc15', 'Medieval Fortune', 'Atinja R$ 100.000,00 de Patrimônio.'),  # noqa: E501
    # Space Odyssey
    card('card_rocket', 'Foguete Lunar', 'To the moon!', R, '#6366f1', 'Space Odyssey', 'Aumente sua renda em 20%.'),  # noqa: E501
    card('card_alien_artifact', 'Artefato Alien', 'Tecnologia desconhecida.', E, '#8b5cf6', 'Space Odyssey', 'Faça 100 transações.'),  # noqa: E501
    card('card_black_hole', 'Buraco Negro', 'Onde o dinheiro some...', U, '#1f2937', 'Space Odyssey', 'Gaste mais do que ganhou em um mês.'),  # noqa: E501
    # RPG Class
    card('card_hero_sword', 'Espada do Herói', 'Corta juros altos.', R, '#ef4444', 'RPG Class', 'Pague uma dívida total.'),  # noqa: E501
    card('card_wizard_staff', 'Cajado Arcano', 'Conjura saldo extra.', E, '#a855f7', 'RPG Class', 'Receba Renda Extra 3 meses seguidos.'),  # noqa: E501
    card('card_rogue_dagger', 'Adaga Ladina', 'Rápido e discreto.', U, '#14b8a6', 'RPG Class', 'Gaste exatamente R$ 1,00.'),  # noqa: E501
    # Elemental Stones
    card('card_ruby', 'Rubi de Fogo', 'Paixão ardente.', R, '#ef4444', 'Elemental Stones', 'Gaste muito em Lazer.'),  # noqa: E501
    card('card_sapphire', 'Safira de Água', 'Calma e fluidez.', R, '#3b82f6', 'Elemental Stones', 'Economize em Contas.'),  # noqa: E501
    card('card_emerald', 'Esmeralda de Terra', 'Estabilidade.', E, '#10b981', 'Elemental Stones', 'Mantenha saldo positivo.'),  # noqa: E501
    card('card_diamond', 'Diamante de Ar', 'Liberdade absoluta.', L, '#b6e3f4', 'Elemental Stones', 'Zere uma fatura alta.'),  # noqa: E501
    # Retro Tech
    card('card_floppy', 'Disquete 1.44MB', 'Armazenamento clássico.', C, '#64748b', 'Retro Tech', 'Salve 10 transações.'),  # noqa: E501
    card('card_crt', 'Monitor CRT', 'Resolução 640x480.', U, '#475569', 'Retro Tech', 'Use o plugin em tela cheia.'),  # noqa: E501
    card('card_cartridge', 'Cartucho Dourado', 'Sopre para funcionar.', L, '#eab308', 'Retro Tech', 'Descubra um bug (brincadeira).'),  # noqa: E501
    # Zodiac
    card('card_aries', 'Moeda de Áries', 'Impulsividade.', C, '#ef4444', 'Zodiac', 'Gaste sem pensar.'),  # noqa: E501
    card('card_taurus', 'Touro de Ouro', 'Estabilidade material.', E, '#166534', 'Zodiac', 'Invista R$ 500,00.'),  # noqa: E501
    card('card_leo', 'Juba de Leão', 'Realeza e brilho.', R, '#f59e0b', 'Zodiac', 'Gaste com Beleza.'),  # noqa: E501
]
