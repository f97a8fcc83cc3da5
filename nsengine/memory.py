"""Tagged memory accounting with zeroed buffer allocation and block helpers."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import MutableSequence, Optional, Sequence

from .logger import LogLevel, log_output

_U64_MASK = (1 << 64) - 1


class MemTag(IntEnum):
    UNKNOWN = 0
    LINEAR_ALLOCATOR = 1
    ARRAY = 2
    VECTOR = 3
    DICT = 4
    RING_QUEUE = 5
    BST = 6
    STRING = 7
    APPLICATION = 8
    JOB = 9
    TEXTURE = 10
    MATERIAL_INSTANCE = 11
    RENDERER = 12
    GAME = 13
    TRANSFORM = 14
    ENTITY = 15
    ENTITY_NODE = 16
    SCENE = 17

    MAX_TAGS = 18
    UNTRACKED = 19


_TRACKED_TAGS = tuple(tag for tag in MemTag if tag < MemTag.MAX_TAGS)

_TAG_LABELS = {
    MemTag.UNKNOWN: "UNKNOWN    ",
    MemTag.LINEAR_ALLOCATOR: "LINEAR_ALLC",
    MemTag.ARRAY: "ARRAY      ",
    MemTag.VECTOR: "VECTOR     ",
    MemTag.DICT: "DICT       ",
    MemTag.RING_QUEUE: "RING_QUEUE ",
    MemTag.BST: "BST        ",
    MemTag.STRING: "STRING     ",
    MemTag.APPLICATION: "APPLICATION",
    MemTag.JOB: "JOB        ",
    MemTag.TEXTURE: "TEXTURE    ",
    MemTag.MATERIAL_INSTANCE: "MAT_INST   ",
    MemTag.RENDERER: "RENDERER   ",
    MemTag.GAME: "GAME       ",
    MemTag.TRANSFORM: "TRANSFORM  ",
    MemTag.ENTITY: "ENTITY     ",
    MemTag.ENTITY_NODE: "ENTITY_NODE",
    MemTag.SCENE: "SCENE      ",
}


@dataclass
class MemoryStats:
    """Bytes currently allocated, overall and per tag."""

    total_allocated: int = 0
    tagged_allocations: dict = field(
        default_factory=lambda: {tag: 0 for tag in _TRACKED_TAGS}
    )


@dataclass
class _MemorySystem:
    total_alloc_size: int
    stats: MemoryStats = field(default_factory=MemoryStats)
    alloc_count: int = 0


_state: Optional[_MemorySystem] = None


def _tracked(tag) -> MemTag:
    tag = MemTag(tag)
    if tag == MemTag.MAX_TAGS:
        raise ValueError("MAX_TAGS is not a memory tag")
    return tag


def memory_system_initialize(total_alloc_size: int = 0) -> bool:
    """Start tracking allocations; returns True on success."""
    global _state
    _state = _MemorySystem(total_alloc_size=int(total_alloc_size))
    log_output(
        LogLevel.DEBUG,
        "Memory system successfully allocated %d bytes.",
        int(total_alloc_size),
    )
    return True


def memory_system_shutdown() -> Optional[MemoryStats]:
    """Stop tracking allocations; returns the final statistics, or None if not running."""
    global _state
    if _state is None:
        return None
    final = get_memory_stats()
    _state = None
    return final


def alloc_raw(size: int, tag=MemTag.UNKNOWN) -> bytearray:
    """Allocate a zeroed buffer of ``size`` bytes, counted under ``tag``."""
    tag = _tracked(tag)
    if size < 0:
        raise ValueError("allocation size must not be negative")
    if tag == MemTag.UNTRACKED:
        return bytearray(size)
    if _state is not None:
        _state.stats.total_allocated = (_state.stats.total_allocated + size) & _U64_MASK
        tagged = _state.stats.tagged_allocations
        tagged[tag] = (tagged[tag] + size) & _U64_MASK
        _state.alloc_count += 1
    else:
        log_output(LogLevel.WARN, "ns::alloc called before the memory system is initialized.")
    return bytearray(size)


def free_raw(block, size: int, tag=MemTag.UNKNOWN) -> None:
    """Release ``block``, removing ``size`` bytes from the counts for ``tag``."""
    tag = _tracked(tag)
    if tag == MemTag.UNTRACKED or _state is None:
        return
    _state.stats.total_allocated = (_state.stats.total_allocated - size) & _U64_MASK
    tagged = _state.stats.tagged_allocations
    tagged[tag] = (tagged[tag] - size) & _U64_MASK


def alloc_n(count: int, item_size: int, tag=MemTag.UNKNOWN) -> bytearray:
    """Allocate a zeroed buffer for ``count`` items of ``item_size`` bytes each."""
    if count < 0 or item_size < 0:
        raise ValueError("count and item size must not be negative")
    return alloc_raw(count * item_size, tag)


def mem_zero(block: MutableSequence) -> MutableSequence:
    """Set every element of ``block`` to zero in place; returns ``block``."""
    block[:] = [0] * len(block)
    return block


def mem_copy(dest: MutableSequence, source: Sequence) -> MutableSequence:
    """Copy ``source`` over the start of ``dest`` in place; returns ``dest``."""
    if len(source) > len(dest):
        raise ValueError("source is larger than destination")
    dest[: len(source)] = source
    return dest


def mem_set(dest: MutableSequence, value: int) -> MutableSequence:
    """Set every element of ``dest`` to ``value`` (low byte for byte buffers); returns ``dest``."""
    if isinstance(dest, (bytearray, bytes, memoryview)):
        value &= 0xFF
    dest[:] = [value] * len(dest)
    return dest


def get_memory_usage_str() -> Optional[str]:
    """A per-tag report of tracked memory, or None before initialisation."""
    if _state is None:
        return None
    gib = 1024 * 1024 * 1024
    mib = 1024 * 1024
    kib = 1024
    lines = ["System memory use (tagged):\n"]
    for tag in _TRACKED_TAGS:
        amount = _state.stats.tagged_allocations[tag]
        if amount >= gib:
            value, unit = amount / gib, "GiB"
        elif amount >= mib:
            value, unit = amount / mib, "MiB"
        elif amount >= kib:
            value, unit = amount / kib, "KiB"
        else:
            value, unit = float(amount), "B"
        lines.append(f"  {_TAG_LABELS[tag]}: {value:.2f}{unit}\n")
    return "".join(lines)


def get_memory_alloc_count() -> int:
    """Number of tracked allocations since initialisation (0 when not initialised)."""
    return _state.alloc_count if _state is not None else 0


def get_memory_stats() -> Optional[MemoryStats]:
    """A snapshot of the current statistics, or None before initialisation."""
    if _state is None:
        return None
    return MemoryStats(
        total_allocated=_state.stats.total_allocated,
        tagged_allocations=dict(_state.stats.tagged_allocations),
    )