from itertools import combinations

import pytest

from almondshell.atlas_packer import AtlasFullError, TexturePacker


def test_first_insert_at_origin():
    assert TexturePacker(64, 64).insert(10, 10) == (0, 0)


def test_four_quadrants_fill_atlas():
    packer = TexturePacker(32, 32)
    positions = [packer.insert(16, 16) for _ in range(4)]
    assert sorted(positions) == [(0, 0), (0, 16), (16, 0), (16, 16)]
    with pytest.raises(AtlasFullError):
        packer.insert(16, 16)


def test_too_large_raises():
    with pytest.raises(AtlasFullError, match="Failed to insert texture"):
        TexturePacker(8, 8).insert(9, 1)


def test_exact_fit():
    packer = TexturePacker(8, 8)
    assert packer.insert(8, 8) == (0, 0)
    with pytest.raises(AtlasFullError):
        packer.insert(1, 1)


def _overlaps(a, b):
    return (
        a[0] < b[0] + b[2] and b[0] < a[0] + a[2]
        and a[1] < b[1] + b[3] and b[1] < a[1] + a[3]
    )


def test_rectangles_do_not_overlap():
    packer = TexturePacker(64, 64)
    sizes = [(20, 10), (10, 20), (30, 5), (5, 5), (12, 12), (8, 16)]
    rects = [(*packer.insert(w, h), w, h) for w, h in sizes]
    assert len(rects) == len(sizes)
    out_of_bounds = [
        r for r in rects
        if not (0 <= r[0] and r[0] + r[2] <= 64 and 0 <= r[1] and r[1] + r[3] <= 64)
    ]
    assert out_of_bounds == []
    overlapping = [(a, b) for a, b in combinations(rects, 2) if _overlaps(a, b)]
    assert overlapping == []