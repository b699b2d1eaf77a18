"""
Unit tests for pseudo feature derivation.
"""

import math

from vibelist.core.features import FEATURE_SEED, derive, fallback_features


class TestDerive:
    """Formula and reproducibility."""

    def test_known_duration_matches_literal_trig_values(self):
        """derive(180): p = 22221."""
        assert 180 * FEATURE_SEED == 22221.0
        f = derive(180)
        energy = abs(math.sin(22221))
        assert f.energy == energy
        assert f.valence == abs(math.cos(44442))
        assert f.danceability == abs(math.sin(66663))
        assert f.bpm == 60 + 120 * energy

    def test_reproducible(self):
        """Same duration gives bit-identical features."""
        for d in (0, 1.5, 180, 200, 245.37, 3600):
            assert derive(d) == derive(d)

    def test_zero_and_unknown_duration(self):
        """Unknown duration is treated as 0: sin(0)=0, cos(0)=1."""
        for d in (0, None):
            f = derive(d)
            assert f.energy == 0.0
            assert f.valence == 1.0
            assert f.danceability == 0.0
            assert f.bpm == 60.0

    def test_known_bpm_overrides(self):
        f = derive(180, known_bpm=128.0)
        assert f.bpm == 128.0
        assert f.energy == abs(math.sin(22221))

    def test_non_positive_bpm_ignored(self):
        f = derive(180, known_bpm=0)
        assert f.bpm == 60 + 120 * f.energy
        f = derive(180, known_bpm=-5)
        assert f.bpm == 60 + 120 * f.energy

    def test_values_in_unit_range(self):
        for d in range(0, 600, 7):
            f = derive(d)
            assert 0.0 <= f.energy <= 1.0
            assert 0.0 <= f.valence <= 1.0
            assert 0.0 <= f.danceability <= 1.0
            assert 60.0 <= f.bpm <= 180.0


class TestFallback:
    def test_fixed_defaults(self):
        f = fallback_features()
        assert f.energy == 0.5
        assert f.valence == 0.5
        assert f.bpm == 100.0
        assert f.danceability == 0.5
