"""
Constants and enumerations for the game.

Defines global constants, enumerations for combatant types, hero and monster
kinds, item categories, encounter kinds and battle actions used throughout the
game.
"""

from enum import Enum

# Number of overall turns after which the Mind Flayer is forced to spawn.
BOSS_TURN_THRESHOLD = 20

# Maximum rage a hero can accumulate.
RAGE_MAX = 100

# Maximum (and starting) mana of every hero.
MANA_MAX = 100

# Default amount of mana restored when no amount is given.
MANA_RESTORE_DEFAULT = 10

# Chance (in percent) for the Wizard's special to stun the monster.
STUN_CHANCE = 25

# Chance (in percent) of a successful escape.
FLEE_CHANCE = 70
FLEE_CHANCE_BOSS = 20

# Chance (in percent) for a monster attack to carry bonus psychic damage.
PSYCHIC_CHANCE = 30
PSYCHIC_DAMAGE = 15

# Battle rewards.
VICTORY_GOLD_BONUS = 10
VICTORY_GOLD_BONUS_BOSS = 100
VICTORY_POTION_CHANCE = 40

# Sorcerer special.
ELEMENTAL_FURY_COST = 30
ELEMENTAL_FURY_BONUS = 10

# Knight special.
HOLY_STRIKE_CRIT_CHANCE = 25
HOLY_STRIKE_CRIT_MULT = 2.5

# Wizard special.
ARCANE_SHIELD_MULT = 1.5

# Bard special.
BATTLE_SONG_RAGE = 15
BATTLE_SONG_HP_STEP = 10

# Standard item names.
HEALING_POTION = "healing_potion"
MANA_POTION = "mana_potion"
CURSED_SWORD = "cursed_sword_plus5"


class NiceEnum(Enum):
    """An enumeration that provides a nicer string representation."""

    def __str__(self) -> str:
        return self.name

    @property
    def display_name(self) -> str:
        return self.name.replace("_", " ").lower().capitalize()


class CombatantType(NiceEnum):
    """Defines which side a combatant fights on."""

    HERO = "HERO"
    MONSTER = "MONSTER"
    BOSS = "BOSS"

    @property
    def emoji(self) -> str:
        """Returns the emoji associated with this combatant type."""
        return {
            CombatantType.HERO: "👤",
            CombatantType.MONSTER: "👹",
            CombatantType.BOSS: "🌩️",
        }.get(self, "❔")

    @property
    def color(self) -> str:
        """Returns the color string associated with this combatant type."""
        return {
            CombatantType.HERO: "bold blue",
            CombatantType.MONSTER: "bold red",
            CombatantType.BOSS: "bold magenta",
        }.get(self, "dim white")

    def colorize(self, message: str) -> str:
        """Applies combatant type color formatting to a message."""
        return f"[{self.color}]{message}[/]"


class HeroKind(NiceEnum):
    """The playable hero archetypes."""

    WIZARD = "WIZARD"
    SORCERER = "SORCERER"
    KNIGHT = "KNIGHT"
    BARD = "BARD"
    ZOOMER = "ZOOMER"

    @property
    def emoji(self) -> str:
        return {
            HeroKind.WIZARD: "🔮",
            HeroKind.SORCERER: "🔥",
            HeroKind.KNIGHT: "⚔️",
            HeroKind.BARD: "🎵",
            HeroKind.ZOOMER: "⚡",
        }.get(self, "❔")


class MonsterKind(NiceEnum):
    """The monsters of the Upside Down."""

    DEMOBAT = "DEMOBAT"
    DEMODOG = "DEMODOG"
    FLAYED_ONE = "FLAYED_ONE"
    MIND_FLAYER = "MIND_FLAYER"


class ItemCategory(NiceEnum):
    """Defines the categories an item can belong to."""

    POTION = "POTION"
    WEAPON = "WEAPON"
    ARMOR = "ARMOR"

    @property
    def emoji(self) -> str:
        return {
            ItemCategory.POTION: "🧪",
            ItemCategory.WEAPON: "🗡️",
            ItemCategory.ARMOR: "🛡️",
        }.get(self, "❔")


class EncounterKind(NiceEnum):
    """The kinds of encounter the dispatcher can roll each overall turn."""

    COMBAT = "COMBAT"
    TREASURE = "TREASURE"
    HEALING = "HEALING"
    TRAP = "TRAP"
    NARRATIVE = "NARRATIVE"


class BattleAction(NiceEnum):
    """The actions a hero can take during its battle turn."""

    ATTACK = "ATTACK"
    SPECIAL = "SPECIAL"
    USE_ITEM = "USE_ITEM"
    FLEE = "FLEE"
    INSPECT = "INSPECT"

    @property
    def emoji(self) -> str:
        return {
            BattleAction.ATTACK: "👊",
            BattleAction.SPECIAL: "✨",
            BattleAction.USE_ITEM: "🎒",
            BattleAction.FLEE: "🏃",
            BattleAction.INSPECT: "🔍",
        }.get(self, "❔")

    @property
    def consumes_turn(self) -> bool:
        """Whether the action hands the turn over to the monster."""
        return self != BattleAction.INSPECT


class BattleState(NiceEnum):
    """The states of a single battle."""

    PLAYER_TURN = "PLAYER_TURN"
    PLAYER_WON = "PLAYER_WON"
    PLAYER_FLED = "PLAYER_FLED"
    PLAYER_DIED = "PLAYER_DIED"

    @property
    def is_terminal(self) -> bool:
        return self != BattleState.PLAYER_TURN


class NarrativeKind(NiceEnum):
    """The narrative vignettes that can be offered to the hero."""

    TRAVELER = "TRAVELER"
    WOUNDED_CREATURE = "WOUNDED_CREATURE"
    SHRINE = "SHRINE"
    CURSED_SWORD = "CURSED_SWORD"


class CampaignResult(NiceEnum):
    """The final outcome of a campaign."""

    VICTORY = "VICTORY"
    DEFEAT = "DEFEAT"
