from __future__ import annotations

from collections.abc import Sequence

from lifesim.domain.models.achievement import (
    ALL_SKILLS,
    Achievement,
    AchievementCategory,
    AchievementReward,
    RewardType,
    StatTarget,
)


def _achievement(
    *,
    id: str,
    title: str,
    description: str,
    category: AchievementCategory,
    threshold: float,
    reward: AchievementReward,
) -> Achievement:
    return Achievement(
        id=id,
        title=title,
        description=description,
        category=category,
        threshold=threshold,
        reward=reward,
    )


ACHIEVEMENT_CATALOG: Sequence[Achievement] = (
    _achievement(
        id="wealth-1",
        title="First Steps",
        description="Reach $10,000 in wealth",
        category=AchievementCategory.WEALTH,
        threshold=10000,
        reward=AchievementReward(
            type=RewardType.CASH,
            value=1000,
            description="$1,000 cash bonus",
        ),
    ),
    _achievement(
        id="wealth-2",
        title="Emerging Fortune",
        description="Reach $100,000 in wealth",
        category=AchievementCategory.WEALTH,
        threshold=100000,
        reward=AchievementReward(
            type=RewardType.CASH,
            value=5000,
            description="$5,000 cash bonus",
        ),
    ),
    _achievement(
        id="wealth-3",
        title="Millionaire Club",
        description="Reach $1,000,000 in wealth",
        category=AchievementCategory.WEALTH,
        threshold=1000000,
        reward=AchievementReward(
            type=RewardType.MULTIPLIER,
            value=1.05,
            description="5% passive income increase",
        ),
    ),
    _achievement(
        id="wealth-4",
        title="Multi-Millionaire",
        description="Reach $10,000,000 in wealth",
        category=AchievementCategory.WEALTH,
        threshold=10000000,
        reward=AchievementReward(
            type=RewardType.MULTIPLIER,
            value=1.1,
            description="10% passive income increase",
        ),
    ),
    _achievement(
        id="wealth-5",
        title="Billionaire Status",
        description="Reach $1,000,000,000 in wealth",
        category=AchievementCategory.WEALTH,
        threshold=1000000000,
        reward=AchievementReward(
            type=RewardType.UNLOCK,
            value=1,
            description="Unlock exclusive investment opportunities",
        ),
    ),
    _achievement(
        id="property-1",
        title="Property Novice",
        description="Purchase your first property",
        category=AchievementCategory.PROPERTY,
        threshold=1,
        reward=AchievementReward(
            type=RewardType.CASH,
            value=2000,
            description="$2,000 cash bonus",
        ),
    ),
    _achievement(
        id="property-2",
        title="Property Collector",
        description="Own 5 different properties",
        category=AchievementCategory.PROPERTY,
        threshold=5,
        reward=AchievementReward(
            type=RewardType.MULTIPLIER,
            value=1.05,
            description="5% property income boost",
        ),
    ),
    _achievement(
        id="property-3",
        title="Real Estate Mogul",
        description="Own 10 properties with a combined value of $5,000,000",
        category=AchievementCategory.PROPERTY,
        threshold=5000000,
        reward=AchievementReward(
            type=RewardType.MULTIPLIER,
            value=1.1,
            description="10% property income boost",
        ),
    ),
    _achievement(
        id="investment-1",
        title="Novice Investor",
        description="Make your first stock purchase",
        category=AchievementCategory.INVESTMENT,
        threshold=1,
        reward=AchievementReward(
            type=RewardType.CASH,
            value=1000,
            description="$1,000 cash bonus",
        ),
    ),
    _achievement(
        id="investment-2",
        title="Portfolio Manager",
        description="Invest in 5 different assets",
        category=AchievementCategory.INVESTMENT,
        threshold=5,
        reward=AchievementReward(
            type=RewardType.MULTIPLIER,
            value=1.03,
            description="3% investment returns boost",
        ),
    ),
    _achievement(
        id="investment-3",
        title="Investment Guru",
        description="Have $1,000,000 in investment assets",
        category=AchievementCategory.INVESTMENT,
        threshold=1000000,
        reward=AchievementReward(
            type=RewardType.UNLOCK,
            value=1,
            description="Unlock exclusive investment opportunities",
        ),
    ),
    _achievement(
        id="lifestyle-1",
        title="Treat Yourself",
        description="Purchase your first lifestyle item",
        category=AchievementCategory.LIFESTYLE,
        threshold=1,
        reward=AchievementReward(
            type=RewardType.CASH,
            value=1000,
            description="$1,000 cash bonus",
        ),
    ),
    _achievement(
        id="lifestyle-2",
        title="Living Large",
        description="Own 5 lifestyle items",
        category=AchievementCategory.LIFESTYLE,
        threshold=5,
        reward=AchievementReward(
            type=RewardType.BONUS,
            value=10,
            description="+10 Happiness boost",
            stat_target=StatTarget.HAPPINESS,
        ),
    ),
    _achievement(
        id="lifestyle-3",
        title="Ultimate Luxury",
        description="Own 10 luxury items worth at least $5,000,000 combined",
        category=AchievementCategory.LIFESTYLE,
        threshold=5000000,
        reward=AchievementReward(
            type=RewardType.BONUS,
            value=25,
            description="+25 Prestige boost",
            stat_target=StatTarget.PRESTIGE,
        ),
    ),
    _achievement(
        id="general-1",
        title="Getting Started",
        description="Create your character and start your journey",
        category=AchievementCategory.GENERAL,
        threshold=1,
        reward=AchievementReward(
            type=RewardType.CASH,
            value=500,
            description="$500 starting bonus",
        ),
    ),
    _achievement(
        id="general-2",
        title="Time Management",
        description="Advance time for 30 days",
        category=AchievementCategory.GENERAL,
        threshold=30,
        reward=AchievementReward(
            type=RewardType.CASH,
            value=2000,
            description="$2,000 cash bonus",
        ),
    ),
    _achievement(
        id="general-3",
        title="Empire Builder",
        description="Reach 100 days in your business empire journey",
        category=AchievementCategory.GENERAL,
        threshold=100,
        reward=AchievementReward(
            type=RewardType.MULTIPLIER,
            value=1.05,
            description="5% overall income boost",
        ),
    ),
    _achievement(
        id="general-4",
        title="Magnate",
        description="Have maximum rating in wealth, happiness, and prestige",
        category=AchievementCategory.GENERAL,
        threshold=100,
        reward=AchievementReward(
            type=RewardType.UNLOCK,
            value=1,
            description="Unlock special game features",
        ),
    ),
    _achievement(
        id="challenge-1",
        title="Market Maestro",
        description="Own at least 50 different stocks across 5+ market sectors",
        category=AchievementCategory.CHALLENGE,
        threshold=50,
        reward=AchievementReward(
            type=RewardType.MULTIPLIER,
            value=1.15,
            description="15% investment returns boost",
        ),
    ),
    _achievement(
        id="challenge-2",
        title="Global Real Estate Tycoon",
        description="Own properties on 3 different continents with a combined value over $10M",
        category=AchievementCategory.CHALLENGE,
        threshold=3,
        reward=AchievementReward(
            type=RewardType.CASH,
            value=1000000,
            description="$1,000,000 cash bonus",
        ),
    ),
    _achievement(
        id="challenge-3",
        title="Crypto Whale",
        description="Hold at least $2M in cryptocurrency for 30+ consecutive days",
        category=AchievementCategory.CHALLENGE,
        threshold=30,
        reward=AchievementReward(
            type=RewardType.UNLOCK,
            value=1,
            description="Unlock exclusive crypto investments",
        ),
    ),
    _achievement(
        id="challenge-4",
        title="Angel Investor",
        description="Successfully fund 10 startup ventures that reach Series B or higher",
        category=AchievementCategory.CHALLENGE,
        threshold=10,
        reward=AchievementReward(
            type=RewardType.MULTIPLIER,
            value=1.2,
            description="20% startup investment returns",
        ),
    ),
    _achievement(
        id="challenge-5",
        title="Luxury Connoisseur",
        description="Own the top tier item in every luxury category",
        category=AchievementCategory.CHALLENGE,
        threshold=5,
        reward=AchievementReward(
            type=RewardType.BONUS,
            value=50,
            description="+50 Prestige boost",
            stat_target=StatTarget.PRESTIGE,
        ),
    ),
    _achievement(
        id="strategy-1",
        title="Diversification Expert",
        description="Maintain a balanced portfolio with no asset class exceeding 30% of total wealth",
        category=AchievementCategory.STRATEGY,
        threshold=100,
        reward=AchievementReward(
            type=RewardType.MULTIPLIER,
            value=1.1,
            description="10% overall returns boost",
        ),
    ),
    _achievement(
        id="strategy-2",
        title="Market Timer",
        description="Buy 10 stocks at their lowest price and sell when they gain at least 50%",
        category=AchievementCategory.STRATEGY,
        threshold=10,
        reward=AchievementReward(
            type=RewardType.CASH,
            value=100000,
            description="$100,000 cash bonus",
        ),
    ),
    _achievement(
        id="strategy-3",
        title="Recession Survivor",
        description="Maintain positive net worth growth during a market downturn lasting 30+ days",
        category=AchievementCategory.STRATEGY,
        threshold=30,
        reward=AchievementReward(
            type=RewardType.UNLOCK,
            value=1,
            description="Unlock hedging strategies",
        ),
    ),
    _achievement(
        id="strategy-4",
        title="Perfect Balance",
        description="Simultaneously maintain 80+ in all personal attributes for 60 days",
        category=AchievementCategory.STRATEGY,
        threshold=60,
        reward=AchievementReward(
            type=RewardType.SKILL,
            value=15,
            description="+15 to all personal attributes",
            skill_target=ALL_SKILLS,
        ),
    ),
    _achievement(
        id="character-1",
        title="Health Enthusiast",
        description="Reach 90+ health points through your lifestyle choices",
        category=AchievementCategory.LIFESTYLE,
        threshold=90,
        reward=AchievementReward(
            type=RewardType.CASH,
            value=5000,
            description="$5,000 cash bonus from health insurance rebate",
        ),
    ),
    _achievement(
        id="character-2",
        title="Stress Management",
        description="Reduce your stress level to below 10 points",
        category=AchievementCategory.LIFESTYLE,
        threshold=10,
        reward=AchievementReward(
            type=RewardType.MULTIPLIER,
            value=1.05,
            description="5% productivity boost from improved focus",
        ),
    ),
    _achievement(
        id="character-3",
        title="Social Butterfly",
        description="Achieve 80+ social connection points",
        category=AchievementCategory.LIFESTYLE,
        threshold=80,
        reward=AchievementReward(
            type=RewardType.UNLOCK,
            value=1,
            description="Unlock exclusive networking opportunities",
        ),
    ),
    _achievement(
        id="character-4",
        title="Master of Skills",
        description="Reach 85+ skill development points",
        category=AchievementCategory.LIFESTYLE,
        threshold=85,
        reward=AchievementReward(
            type=RewardType.CASH,
            value=10000,
            description="$10,000 from new career opportunities",
        ),
    ),
    _achievement(
        id="character-5",
        title="Work-Life Balance",
        description="Maintain 50+ hours of free time while having 70+ happiness",
        category=AchievementCategory.LIFESTYLE,
        threshold=100,
        reward=AchievementReward(
            type=RewardType.BONUS,
            value=20,
            description="+20 Happiness boost",
            stat_target=StatTarget.HAPPINESS,
        ),
    ),
    _achievement(
        id="character-6",
        title="Environmental Champion",
        description="Achieve an environmental impact score of 60+",
        category=AchievementCategory.LIFESTYLE,
        threshold=60,
        reward=AchievementReward(
            type=RewardType.CASH,
            value=7500,
            description="$7,500 from green technology grants",
        ),
    ),
    _achievement(
        id="character-7",
        title="Balanced Life",
        description="Achieve 70+ in health, social, and skills simultaneously",
        category=AchievementCategory.LIFESTYLE,
        threshold=100,
        reward=AchievementReward(
            type=RewardType.UNLOCK,
            value=2,
            description="Unlock premium lifestyle opportunities",
        ),
    ),
    _achievement(
        id="special-1",
        title="Overnight Success",
        description="Double your net worth in a single day",
        category=AchievementCategory.STRATEGY,
        threshold=100,
        reward=AchievementReward(
            type=RewardType.CASH,
            value=50000,
            description="$50,000 cash bonus",
        ),
    ),
    _achievement(
        id="special-2",
        title="Diamond Hands",
        description="Hold onto an investment that drops 30% and then recovers to gain 50%",
        category=AchievementCategory.STRATEGY,
        threshold=100,
        reward=AchievementReward(
            type=RewardType.MULTIPLIER,
            value=1.15,
            description="15% investment resilience bonus",
        ),
    ),
    _achievement(
        id="special-3",
        title="Property Flip Master",
        description="Buy a property and sell it for at least 50% profit within 60 days",
        category=AchievementCategory.STRATEGY,
        threshold=100,
        reward=AchievementReward(
            type=RewardType.CASH,
            value=75000,
            description="$75,000 cash bonus",
        ),
    ),
    _achievement(
        id="special-4",
        title="Minimalist Millionaire",
        description="Reach $1M net worth while owning fewer than 5 lifestyle items",
        category=AchievementCategory.CHALLENGE,
        threshold=100,
        reward=AchievementReward(
            type=RewardType.MULTIPLIER,
            value=1.1,
            description="10% wealth growth rate",
        ),
    ),
    _achievement(
        id="special-5",
        title="Risk Taker",
        description="Invest at least $500,000 in high-risk assets and maintain for 30 days",
        category=AchievementCategory.CHALLENGE,
        threshold=30,
        reward=AchievementReward(
            type=RewardType.CASH,
            value=250000,
            description="$250,000 cash bonus",
        ),
    ),
    _achievement(
        id="special-6",
        title="Early Retirement",
        description="Generate $50,000+ monthly passive income from investments",
        category=AchievementCategory.STRATEGY,
        threshold=50000,
        reward=AchievementReward(
            type=RewardType.BONUS,
            value=30,
            description="+30 Happiness and reduced stress",
            stat_target=StatTarget.HAPPINESS,
        ),
    ),
    _achievement(
        id="special-7",
        title="Sustainable Legacy",
        description="Maintain 80+ environmental impact while having $5M+ net worth",
        category=AchievementCategory.CHALLENGE,
        threshold=100,
        reward=AchievementReward(
            type=RewardType.UNLOCK,
            value=1,
            description="Unlock sustainable investment opportunities",
        ),
    ),
    _achievement(
        id="challenge-11",
        title="Financial Phoenix",
        description="Recover from a net worth drop of at least 40% and double your previous peak",
        category=AchievementCategory.CHALLENGE,
        threshold=100,
        reward=AchievementReward(
            type=RewardType.MULTIPLIER,
            value=1.25,
            description="25% faster recovery from market downturns",
        ),
    ),
    _achievement(
        id="challenge-12",
        title="Minimalist Millionaire",
        description="Reach $5 million net worth while owning no more than 5 lifestyle items",
        category=AchievementCategory.CHALLENGE,
        threshold=5000000,
        reward=AchievementReward(
            type=RewardType.MULTIPLIER,
            value=1.15,
            description="15% reduced costs on all future purchases",
        ),
    ),
    _achievement(
        id="challenge-13",
        title="High-Risk, High-Reward",
        description="Invest at least $1 million in extremely volatile assets and hold for 60 days",
        category=AchievementCategory.CHALLENGE,
        threshold=60,
        reward=AchievementReward(
            type=RewardType.CASH,
            value=500000,
            description="$500,000 cash bonus and improved luck with risky investments",
        ),
    ),
    _achievement(
        id="strategy-10",
        title="Calculated Risk",
        description="Maintain a perfect risk-adjusted return ratio for 90 days",
        category=AchievementCategory.STRATEGY,
        threshold=90,
        reward=AchievementReward(
            type=RewardType.MULTIPLIER,
            value=1.12,
            description="12% better returns on all investments",
        ),
    ),
    _achievement(
        id="strategy-11",
        title="Passive Income Master",
        description="Generate $50,000+ in daily passive income without active work",
        category=AchievementCategory.STRATEGY,
        threshold=50000,
        reward=AchievementReward(
            type=RewardType.UNLOCK,
            value=1,
            description="Unlock elite passive income opportunities",
        ),
    ),
    _achievement(
        id="strategy-12",
        title="Sustainable Growth",
        description="Maintain a steady 5%+ growth rate for 2 years without speculative investments",
        category=AchievementCategory.STRATEGY,
        threshold=24,
        reward=AchievementReward(
            type=RewardType.BONUS,
            value=20,
            description="+20 Happiness and long-term investment bonuses",
            stat_target=StatTarget.HAPPINESS,
        ),
    ),
    _achievement(
        id="strategy-13",
        title="Precious Assets",
        description="Allocate 20% of your portfolio to precious metals and alternative assets during inflation",
        category=AchievementCategory.STRATEGY,
        threshold=100,
        reward=AchievementReward(
            type=RewardType.MULTIPLIER,
            value=1.1,
            description="10% better protection against economic downturns",
        ),
    ),
)


def catalog_ids(catalog: Sequence[Achievement] | None = None) -> tuple[str, ...]:
    return tuple(row.id for row in (ACHIEVEMENT_CATALOG if catalog is None else catalog))


def fresh_achievements(catalog: Sequence[Achievement] | None = None) -> list[Achievement]:
    """Clone the template into mutable, locked achievements."""
    source = ACHIEVEMENT_CATALOG if catalog is None else catalog
    return [row.fresh_copy() for row in source]
