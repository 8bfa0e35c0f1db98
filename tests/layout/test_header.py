"""
Unit tests for the score info header.

Measuring and painting share one row list, so every measured row
must be painted with the same height.
"""

import pytest
from unittest.mock import MagicMock

from scorepage.core.models import Score, Track
from scorepage.layout import HeaderFooterElements, ScoreInfoLayout
from scorepage.output.canvas import TextAlign

STANDARD = (64, 59, 55, 50, 45, 40)
DROP_D = (64, 59, 55, 50, 45, 38)


def _recording_canvas():
    """MagicMock canvas recording (text, x, y, align) of fill_text calls."""
    canvas = MagicMock()
    calls = []
    canvas.fill_text.side_effect = lambda text, x, y: calls.append((text, x, y, canvas.text_align))
    canvas.calls = calls
    return canvas


class TestHeaderMeasure:
    """Tests for ScoreInfoLayout.measure()."""

    def test_measure_when_empty_score_then_fixed_gaps_only(self):
        info = ScoreInfoLayout(Score(), tracks=())

        assert info.measure() == pytest.approx(20 + 40)

    def test_measure_when_all_text_fields_then_rows_summed(self):
        # Arrange
        score = Score(title="T", subtitle="S", artist="A", album="B", words="W", music="M")

        # Act
        height = ScoreInfoLayout(score, tracks=()).measure()

        # Assert: title + 3 text rows + shared composer row + gap + closing
        assert height == pytest.approx(35 + 3 * 20 + 20 + 20 + 40)

    def test_measure_when_words_equal_music_then_single_row(self):
        score = Score(words="Same", music="Same")
        info = ScoreInfoLayout(score, tracks=())

        assert [r.name for r in info.rows] == ["words_and_music", "info_gap"]
        assert info.measure() == pytest.approx(20 + 20 + 40)

    def test_measure_when_only_words_then_composer_row_present(self):
        info = ScoreInfoLayout(Score(words="Poet"), tracks=())

        assert info.rows[0].name == "words_music"
        assert info.measure() == pytest.approx(80)

    def test_measure_when_hidden_then_zero(self):
        score = Score(title="T", subtitle="S")
        info = ScoreInfoLayout(score, tracks=(Track(tuning=DROP_D),), flags=HeaderFooterElements.NONE)

        assert info.measure() == 0
        assert info.rows == []

    def test_measure_when_title_flag_disabled_then_title_skipped(self):
        flags = HeaderFooterElements.ALL & ~HeaderFooterElements.TITLE
        info = ScoreInfoLayout(Score(title="T", artist="A"), tracks=(), flags=flags)

        assert info.measure() == pytest.approx(20 + 20 + 40)

    def test_measure_when_scaled_then_all_rows_scaled(self):
        info = ScoreInfoLayout(Score(title="T"), tracks=(), scale=0.5)

        assert info.measure() == pytest.approx((35 + 20 + 40) * 0.5)

    def test_flags_for_when_hide_info_then_none(self):
        assert ScoreInfoLayout.flags_for(True) == HeaderFooterElements.NONE
        assert ScoreInfoLayout.flags_for(False) == HeaderFooterElements.ALL


class TestHeaderTuning:
    """Tests for the tuning diagram rows."""

    def test_measure_when_standard_tuning_then_name_and_gap(self):
        info = ScoreInfoLayout(Score(), tracks=(Track(tuning=STANDARD),))

        assert [r.name for r in info.rows] == ["info_gap", "tuning_name", "tuning_gap"]
        assert info.measure() == pytest.approx(20 + 15 + 15 + 40)

    def test_measure_when_non_standard_tuning_then_string_columns(self):
        info = ScoreInfoLayout(Score(), tracks=(Track(tuning=DROP_D),))

        # 6 strings -> 3 per column
        assert info.measure() == pytest.approx(20 + 15 + 3 * 15 + 15 + 40)

    def test_measure_when_odd_string_count_then_rounds_up(self):
        banjo = (62, 59, 55, 50, 67)
        info = ScoreInfoLayout(Score(), tracks=(Track(tuning=banjo),))

        strings = next(r for r in info.rows if r.name == "tuning_strings")
        assert strings.height == pytest.approx(3 * 15)

    def test_measure_when_unknown_tuning_then_skipped(self):
        info = ScoreInfoLayout(Score(), tracks=(Track(tuning=(1, 2, 3)),))

        assert info.measure() == pytest.approx(60)

    def test_measure_when_percussion_then_skipped(self):
        info = ScoreInfoLayout(Score(), tracks=(Track(tuning=STANDARD, is_percussion=True),))

        assert info.measure() == pytest.approx(60)

    def test_measure_when_two_tracks_then_skipped(self):
        tracks = (Track(tuning=STANDARD), Track(tuning=DROP_D))

        assert ScoreInfoLayout(Score(), tracks=tracks).measure() == pytest.approx(60)

    def test_paint_when_non_standard_then_two_columns(self):
        # Arrange
        info = ScoreInfoLayout(Score(), tracks=(Track(tuning=DROP_D),))
        canvas = _recording_canvas()

        # Act
        info.paint(canvas, x=40, y=0, page_width=950)

        # Assert
        texts = [(t, x, y) for t, x, y, _ in canvas.calls]
        assert texts[0] == ("Dropped D Tuning", 40, 20)
        strings = texts[1:]
        assert [t for t, _, _ in strings] == [
            "(1) = E", "(2) = B", "(3) = G", "(4) = D", "(5) = A", "(6) = D",
        ]
        assert [(x, y) for _, x, y in strings[:3]] == [(40, 35), (40, 50), (40, 65)]
        assert [(x, y) for _, x, y in strings[3:]] == [(83, 35), (83, 50), (83, 65)]


class TestHeaderPaint:
    """Tests for ScoreInfoLayout.paint()."""

    def test_paint_when_text_fields_then_rows_at_measured_offsets(self):
        # Arrange
        score = Score(title="Title", subtitle="Sub", album="Album")
        info = ScoreInfoLayout(score, tracks=())
        canvas = _recording_canvas()

        # Act
        info.paint(canvas, x=40, y=40, page_width=950)

        # Assert
        assert canvas.calls == [
            ("Title", 475, 40, TextAlign.CENTER),
            ("Sub", 475, 75, TextAlign.CENTER),
            ("Album", 475, 95, TextAlign.CENTER),
        ]

    def test_paint_when_words_and_music_differ_then_right_and_left(self):
        score = Score(words="Poet", music="Composer")
        canvas = _recording_canvas()

        ScoreInfoLayout(score, tracks=()).paint(canvas, x=40, y=40, page_width=950)

        assert canvas.calls == [
            ("Music by Composer", 910, 40, TextAlign.RIGHT),
            ("Words by Poet", 40, 40, TextAlign.LEFT),
        ]

    def test_paint_when_words_equal_music_then_combined_line(self):
        canvas = _recording_canvas()

        ScoreInfoLayout(Score(words="Both", music="Both"), tracks=()).paint(canvas, 40, 40, 950)

        assert canvas.calls == [("Music and Words by Both", 475, 40, TextAlign.CENTER)]

    def test_paint_when_returned_y_then_uses_painted_closing_gap(self):
        """Painting ends 15 units above the measured height (25 vs 40 gap)."""
        info = ScoreInfoLayout(Score(title="T", artist="A"), tracks=(Track(tuning=DROP_D),))

        end = info.paint(MagicMock(), x=40, y=40, page_width=950)

        assert end == pytest.approx(40 + info.measure() - 40 + 25)

    def test_paint_when_hidden_then_nothing_painted(self):
        score = Score(title="T", words="W", music="M")
        info = ScoreInfoLayout(score, tracks=(Track(tuning=DROP_D),), flags=HeaderFooterElements.NONE)
        canvas = MagicMock()

        end = info.paint(canvas, x=40, y=40, page_width=950)

        assert end == 40
        canvas.fill_text.assert_not_called()

    def test_paint_when_rows_then_each_row_painted_at_its_measured_top(self):
        # Arrange
        score = Score(title="T", subtitle="S", artist="A", album="B", words="W", music="W")
        info = ScoreInfoLayout(score, tracks=(Track(tuning=STANDARD),))
        canvas = _recording_canvas()

        # Act
        info.paint(canvas, x=0, y=0, page_width=100)

        # Assert
        tops = []
        y = 0.0
        for row in info.rows:
            if row.paint is not None:
                tops.append(y)
            y += row.height
        assert [c[2] for c in canvas.calls] == tops
