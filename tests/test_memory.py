import pytest

from nsengine import memory
from nsengine.memory import MemTag

MEMTAG = MemTag.UNTRACKED


@pytest.fixture
def system():
    assert memory.memory_system_initialize(0) is True
    yield
    memory.memory_system_shutdown()


def test_alloc_dealloc_raw(system):
    block = memory.alloc_raw(4, MEMTAG)
    assert len(block) == 4
    block[0:4] = (12345).to_bytes(4, "little")
    assert int.from_bytes(block, "little") == 12345
    memory.free_raw(block, 4, MEMTAG)
    assert memory.get_memory_alloc_count() == 0


def test_alloc_dealloc_n(system):
    block = memory.alloc_n(3, 4, MEMTAG)
    assert len(block) == 12
    assert bytes(block) == bytes(12)
    memory.free_raw(block, 12, MEMTAG)


def test_mem_zero():
    data = [1, 2, 3]
    result = memory.mem_zero(data)
    assert data == [0, 0, 0]
    assert result is data


def test_mem_set():
    data = [1, 2, 3]
    memory.mem_set(data, 4)
    assert data == [4, 4, 4]


def test_mem_set_bytes_uses_low_byte():
    data = bytearray(3)
    memory.mem_set(data, 0x104)
    assert data == bytearray([4, 4, 4])


def test_mem_copy():
    data = [1, 2, 3]
    data2 = [4, 5, 6]
    memory.mem_copy(data, data2)
    assert data == data2


def test_mem_copy_too_large():
    with pytest.raises(ValueError):
        memory.mem_copy([0], [1, 2])


def test_tracked_allocation_stats(system):
    block = memory.alloc_raw(100, MemTag.GAME)
    assert bytes(block) == bytes(100)
    stats = memory.get_memory_stats()
    assert stats.total_allocated == 100
    assert stats.tagged_allocations[MemTag.GAME] == 100
    assert memory.get_memory_alloc_count() == 1
    memory.free_raw(block, 100, MemTag.GAME)
    stats = memory.get_memory_stats()
    assert stats.total_allocated == 0
    assert stats.tagged_allocations[MemTag.GAME] == 0
    assert memory.get_memory_alloc_count() == 1


def test_untracked_not_counted(system):
    memory.alloc_raw(50, MemTag.UNTRACKED)
    assert memory.get_memory_stats().total_allocated == 0
    assert memory.get_memory_alloc_count() == 0


def test_usage_string(system):
    memory.alloc_raw(2048, MemTag.TEXTURE)
    report = memory.get_memory_usage_str()
    assert report.startswith("System memory use (tagged):\n")
    assert "  TEXTURE    : 2.00KiB\n" in report
    assert "  UNKNOWN    : 0.00B\n" in report
    assert len(report.splitlines()) == 19


def test_uninitialised():
    memory.memory_system_shutdown()
    assert memory.get_memory_usage_str() is None
    assert memory.get_memory_stats() is None
    assert memory.get_memory_alloc_count() == 0
    assert len(memory.alloc_raw(8, MemTag.GAME)) == 8


def test_max_tags_rejected(system):
    with pytest.raises(ValueError):
        memory.alloc_raw(1, MemTag.MAX_TAGS)