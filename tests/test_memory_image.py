import pytest

from reilgraph.memory_image import Mapping, MemoryImage

BASE = 0x400000
CODE = bytes(range(16))
DATA = bytes(range(100, 108))


@pytest.fixture
def image():
    memory = MemoryImage("aarch64")
    memory.add_mapping(Mapping(BASE, CODE, readable=True, executable=True))
    memory.add_mapping(
        Mapping(BASE + 0x1000, DATA, readable=True, writable=True)
    )
    return memory


def test_architecture_name(image):
    assert image.architecture_name == "aarch64"


def test_mappings_in_insertion_order(image):
    assert [m.address for m in image.mappings()] == [BASE, BASE + 0x1000]
    assert image.mappings()[0].data == CODE


def test_mapping_data_converted_to_bytes():
    mapping = Mapping(0, [1, 2, 3])
    assert mapping.data == bytes([1, 2, 3])


def test_permissions(image):
    assert image.executable(BASE) is True
    assert image.readable(BASE) is True
    assert image.writable(BASE) is False
    assert image.writable(BASE + 0x1000) is True
    assert image.executable(BASE + 0x1000) is False


def test_size_must_fit_in_mapping(image):
    assert image.executable(BASE, len(CODE)) is True
    assert image.executable(BASE, len(CODE) + 1) is False
    assert image.readable(BASE + 4, len(CODE) - 4) is True


def test_unmapped_address(image):
    assert image.readable(BASE - 4) is False
    assert image.executable(BASE + 0x800) is False


def test_empty_range_at_mapping_end_is_covered(image):
    assert image.executable(BASE + len(CODE)) is True


def test_overlapping_mappings_must_all_allow():
    memory = MemoryImage("aarch64")
    memory.add_mapping(Mapping(BASE, CODE, readable=True, executable=True))
    memory.add_mapping(Mapping(BASE + 4, CODE[:4], readable=True))
    assert memory.readable(BASE + 4, 4) is True
    assert memory.executable(BASE + 4, 4) is False
    assert memory.executable(BASE, 4) is True


def test_access_ok_with_combined_request(image):
    assert image.access_ok(BASE, 4, True, False, True) is True
    assert image.access_ok(BASE, 4, True, True, False) is False


def test_read_returns_rest_of_mapping(image):
    assert bytes(image.read(BASE)) == CODE
    assert bytes(image.read(BASE + 4)) == CODE[4:]
    assert bytes(image.read(BASE + 0x1002)) == DATA[2:]


def test_read_unmapped_is_empty(image):
    assert len(image.read(BASE - 1)) == 0
    assert len(image.read(BASE + len(CODE))) == 0


def test_read_prefers_later_mapping():
    memory = MemoryImage("aarch64")
    memory.add_mapping(Mapping(BASE, CODE, readable=True))
    memory.add_mapping(Mapping(BASE + 8, DATA, readable=True))
    assert bytes(memory.read(BASE + 8)) == DATA
    assert bytes(memory.read(BASE + 2)) == CODE[2:]