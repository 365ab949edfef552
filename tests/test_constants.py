"""
Tests for bytesize.constants module.
"""
import pytest
from bytesize.constants import (
    B, KB, MB, GB, TB, PB, EB,
    MAX_BYTES,
    UNITS,
    UNIT_ALIASES,
    lookup_unit,
    unit_for_multiplier,
)


class TestMultipliers:
    """Tests for the unit multiplier constants."""
    
    def test_values(self):
        """Test each multiplier is a power of 1024."""
        assert B == 1
        assert KB == 1024
        assert MB == 1024 ** 2
        assert GB == 1024 ** 3
        assert TB == 1024 ** 4
        assert PB == 1024 ** 5
        assert EB == 1024 ** 6
    
    def test_max_bytes(self):
        """Test the 64-bit ceiling."""
        assert MAX_BYTES == 18446744073709551615


class TestUnits:
    """Tests for the unit table."""
    
    def test_order_and_rank(self):
        """Test units are ordered smallest to largest by rank."""
        assert [u.short for u in UNITS] == ['B', 'KB', 'MB', 'GB', 'TB', 'PB', 'EB']
        for rank, unit in enumerate(UNITS):
            assert unit.rank == rank
            assert unit.multiplier == 2 ** (10 * rank)
    
    def test_long_names(self):
        """Test singular and plural long names."""
        assert [u.long for u in UNITS] == [
            'byte', 'kilobyte', 'megabyte', 'gigabyte',
            'terabyte', 'petabyte', 'exabyte',
        ]
        assert UNITS[1].plural == 'kilobytes'
    
    def test_byte_aliases(self):
        """Test bytes have no single-letter prefix besides 'b'."""
        assert UNITS[0].aliases == {'b', 'byte', 'bytes'}
    
    def test_prefixed_aliases(self):
        """Test prefixed units accept letter, short, long and plural forms."""
        assert UNITS[1].aliases == {'k', 'kb', 'kilobyte', 'kilobytes'}
        assert UNITS[6].aliases == {'e', 'eb', 'exabyte', 'exabytes'}
    
    def test_aliases_unique(self):
        """Test no spelling maps to two units."""
        total = sum(len(u.aliases) for u in UNITS)
        assert len(UNIT_ALIASES) == total
    
    def test_matches(self):
        """Test per-unit spelling check."""
        assert UNITS[2].matches('MB')
        assert UNITS[2].matches(' Megabytes ')
        assert not UNITS[2].matches('GB')


class TestLookupUnit:
    """Tests for lookup_unit function."""
    
    @pytest.mark.parametrize('name,short', [
        ('b', 'B'),
        ('BYTES', 'B'),
        ('k', 'KB'),
        ('Kb', 'KB'),
        ('kilobyte', 'KB'),
        ('GB', 'GB'),
        ('terabytes', 'TB'),
        ('p', 'PB'),
        ('ExaByte', 'EB'),
    ])
    def test_known(self, name, short):
        """Test recognized spellings in any case."""
        assert lookup_unit(name).short == short
    
    @pytest.mark.parametrize('name', ['potato', '', 'kib', 'kilo', 'x'])
    def test_unknown(self, name):
        """Test unrecognized spellings."""
        assert lookup_unit(name) is None


class TestUnitForMultiplier:
    """Tests for unit_for_multiplier function."""
    
    def test_exact(self):
        """Test exact multipliers map to units."""
        assert unit_for_multiplier(GB).short == 'GB'
    
    def test_not_a_unit(self):
        """Test other counts do not."""
        assert unit_for_multiplier(1000) is None
