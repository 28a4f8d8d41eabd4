"""
Factory that turns tokenized lines into CombatLogRecord objects.
"""

import logging
from collections import Counter
from dataclasses import replace
from typing import Any, Callable, Dict, List

from .errors import CombatLogParseError, FieldFormatError
from .events import (
    AuraSuffix,
    AuraType,
    CombatLogRecord,
    DamageSuffix,
    DispelSuffix,
    EnchantPrefix,
    EnergizeSuffix,
    EnvironmentalPrefix,
    ExtraAttacksSuffix,
    HealSuffix,
    InterruptSuffix,
    LeechSuffix,
    MissSuffix,
    Prefix,
    SpellPrefix,
    Suffix,
)
from .schemas import EventLayout, EventSchema, PrefixKind, SuffixKind
from .tokenizer import (
    ParsedLine,
    parse_int,
    parse_nil_bool,
    parse_spell_school,
    parse_uint,
    parse_uint_or_nil,
    strip_quotes,
)

logger = logging.getLogger(__name__)


def parse_aura_type(value: str) -> AuraType:
    """Parse a BUFF/DEBUFF field."""
    value = strip_quotes(value)
    try:
        return AuraType(value)
    except ValueError:
        raise FieldFormatError(f"expected BUFF or DEBUFF, got {value!r}") from None


# Parsers for the trailing suffix fields in EventSchema.OPTIONAL_SUFFIX_PARAMS
OPTIONAL_FIELD_PARSERS: Dict[str, Callable[[str], Any]] = {
    "glancing": parse_nil_bool,
    "crushing": parse_nil_bool,
    "amount_missed": parse_uint_or_nil,
    "stacks": parse_uint_or_nil,
}


def _spell_prefix(f: List[str], i: int) -> SpellPrefix:
    return SpellPrefix(
        spell_id=parse_uint(f[i]),
        spell_name=strip_quotes(f[i + 1]),
        spell_school=parse_spell_school(f[i + 2]),
    )


def _enchant_prefix(f: List[str], i: int) -> EnchantPrefix:
    return EnchantPrefix(
        spell_name=strip_quotes(f[i]),
        item_id=parse_uint(f[i + 1]),
        item_name=strip_quotes(f[i + 2]),
    )


def _environmental_prefix(f: List[str], i: int) -> EnvironmentalPrefix:
    return EnvironmentalPrefix(environmental_type=strip_quotes(f[i]))


def _damage_suffix(f: List[str], i: int) -> DamageSuffix:
    return DamageSuffix(
        amount=parse_uint(f[i]),
        overkill=parse_int(f[i + 1]),
        school=parse_spell_school(f[i + 2]),
        resisted=parse_uint_or_nil(f[i + 3]),
        blocked=parse_uint_or_nil(f[i + 4]),
        absorbed=parse_uint_or_nil(f[i + 5]),
        critical=parse_nil_bool(f[i + 6]),
    )


def _heal_suffix(f: List[str], i: int) -> HealSuffix:
    return HealSuffix(
        amount=parse_uint(f[i]),
        overhealing=parse_uint_or_nil(f[i + 1]),
        absorbed=parse_uint_or_nil(f[i + 2]),
        critical=parse_nil_bool(f[i + 3]),
    )


def _miss_suffix(f: List[str], i: int) -> MissSuffix:
    return MissSuffix(miss_type=strip_quotes(f[i]))


def _aura_suffix(f: List[str], i: int) -> AuraSuffix:
    return AuraSuffix(aura_type=parse_aura_type(f[i]))


def _energize_suffix(f: List[str], i: int) -> EnergizeSuffix:
    return EnergizeSuffix(amount=parse_int(f[i]), power_type=parse_int(f[i + 1]))


def _interrupt_suffix(f: List[str], i: int) -> InterruptSuffix:
    return InterruptSuffix(
        extra_spell_id=parse_uint(f[i]),
        extra_spell_name=strip_quotes(f[i + 1]),
        extra_spell_school=parse_spell_school(f[i + 2]),
    )


def _extra_attacks_suffix(f: List[str], i: int) -> ExtraAttacksSuffix:
    return ExtraAttacksSuffix(amount=parse_uint(f[i]))


def _dispel_suffix(f: List[str], i: int) -> DispelSuffix:
    return DispelSuffix(
        extra_spell_id=parse_uint(f[i]),
        extra_spell_name=strip_quotes(f[i + 1]),
        extra_spell_school=parse_spell_school(f[i + 2]),
        aura_type=parse_aura_type(f[i + 3]),
    )


def _leech_suffix(f: List[str], i: int) -> LeechSuffix:
    return LeechSuffix(
        amount=parse_uint(f[i]),
        power_type=parse_int(f[i + 1]),
        extra_amount=parse_uint_or_nil(f[i + 2]),
    )


PREFIX_BUILDERS: Dict[PrefixKind, Callable[[List[str], int], Prefix]] = {
    PrefixKind.SPELL: _spell_prefix,
    PrefixKind.ENCHANT: _enchant_prefix,
    PrefixKind.ENVIRONMENTAL: _environmental_prefix,
}

SUFFIX_BUILDERS: Dict[SuffixKind, Callable[[List[str], int], Suffix]] = {
    SuffixKind.DAMAGE: _damage_suffix,
    SuffixKind.HEAL: _heal_suffix,
    SuffixKind.MISS: _miss_suffix,
    SuffixKind.AURA: _aura_suffix,
    SuffixKind.ENERGIZE: _energize_suffix,
    SuffixKind.INTERRUPT: _interrupt_suffix,
    SuffixKind.EXTRA_ATTACKS: _extra_attacks_suffix,
    SuffixKind.DISPEL: _dispel_suffix,
    SuffixKind.LEECH: _leech_suffix,
}


class EventFactory:
    """
    Builds CombatLogRecord objects from tokenized lines.

    Unknown event types still produce a record (with no prefix or suffix);
    they are counted in ``unknown_event_types`` and, unless ``warn_unknown``
    is False, logged once per tag.
    """

    def __init__(self, warn_unknown: bool = True):
        self.warn_unknown = warn_unknown
        self.unknown_event_types: Counter = Counter()

    def create_record(self, parsed: ParsedLine) -> CombatLogRecord:
        """
        Create a record from a tokenized line.

        Args:
            parsed: ParsedLine from the tokenizer

        Returns:
            CombatLogRecord with the prefix and suffix fixed by its event type

        Raises:
            CombatLogParseError: If a field does not match its grammar or the
                line is too short for its layout
        """
        f = parsed.fields
        layout = EventSchema.get_layout(parsed.event_type)

        if layout is None:
            if self.warn_unknown and parsed.event_type not in self.unknown_event_types:
                logger.warning(
                    f"Unknown event type {parsed.event_type!r} on line {parsed.line_number}"
                )
            self.unknown_event_types[parsed.event_type] += 1
            layout = EventLayout()
        elif len(f) < layout.min_field_count:
            raise CombatLogParseError(
                f"{parsed.event_type} needs {layout.min_field_count} fields, got {len(f)}",
                parsed.line_number,
                parsed.raw_line,
            )

        try:
            prefix = None
            if layout.prefix is not None:
                prefix = PREFIX_BUILDERS[layout.prefix](f, layout.prefix_offset)

            suffix = None
            if layout.suffix is not None:
                suffix = SUFFIX_BUILDERS[layout.suffix](f, layout.suffix_offset)
                optional = self._optional_suffix_fields(layout, f)
                if optional:
                    suffix = replace(suffix, **optional)
        except FieldFormatError as e:
            raise CombatLogParseError(
                f"{parsed.event_type}: {e}", parsed.line_number, parsed.raw_line
            ) from e

        return CombatLogRecord(
            timestamp=parsed.timestamp,
            event_type=parsed.event_type,
            source_id=f[1],
            source_name=strip_quotes(f[2]),
            target_id=f[4],
            target_name=strip_quotes(f[5]),
            prefix=prefix,
            suffix=suffix,
        )

    @staticmethod
    def _optional_suffix_fields(layout: EventLayout, f: List[str]) -> Dict[str, Any]:
        """Parse the trailing suffix fields present on the line."""
        start = layout.suffix_offset + len(EventSchema.SUFFIX_PARAMS[layout.suffix])
        values = {}
        for index, name in enumerate(EventSchema.OPTIONAL_SUFFIX_PARAMS.get(layout.suffix, []), start):
            if index < len(f) and f[index] != "":
                values[name] = OPTIONAL_FIELD_PARSERS[name](f[index])
        return values
