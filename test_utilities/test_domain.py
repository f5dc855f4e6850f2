from pathlib import Path

import pytest

from background_replacement.domain import CandidateFilter, ProgressTracker, is_supported_image, progress_percent


@pytest.mark.parametrize("name", ["bg.jpg", "bg.JPG", "cover.jpeg", "a.b.Png", "/x/y/z.png"])
def test_supported_extensions(name):
    assert is_supported_image(name)


@pytest.mark.parametrize("name", ["notes.txt", "bg.gif", "bg.jpg.bak", "png", ".png", "folder/"])
def test_unsupported_extensions(name):
    assert not is_supported_image(name)


def test_custom_extension_set():
    assert is_supported_image("a.webp", extensions=(".webp",))
    assert not is_supported_image("a.jpg", extensions=(".webp",))


def test_progress_percent_floors():
    assert [progress_percent(i, 3) for i in (1, 2, 3)] == [33, 66, 100]
    assert progress_percent(1, 7) == 14
    assert progress_percent(29, 100) == 29


def test_progress_percent_rejects_zero_total():
    with pytest.raises(ValueError):
        progress_percent(0, 0)


def test_progress_tracker_is_non_decreasing():
    tracker = ProgressTracker(total=6)
    values = [tracker.advance() for _ in range(6)]
    assert values == sorted(values)
    assert values[-1] == 100
    assert tracker.replaced == 6


def test_candidate_filter_keeps_order():
    paths = [Path("A/bg.jpg"), Path("B/notes.txt"), Path("B/cover.png")]
    selected = CandidateFilter().select(paths)
    assert [c.path for c in selected] == [Path("A/bg.jpg"), Path("B/cover.png")]
    assert selected[1].folder == Path("B")
