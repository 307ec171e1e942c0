"""
Unit tests for LayoutEngine

Covers the node/progress state machine, redraw requests and the derived
geometry read during a draw pass.
"""
import logging
import warnings

import pytest

from nodebar.config import BarStyle
from nodebar.exceptions import InvalidInputError, OutOfRangeProgressWarning
from nodebar.layout import LayoutEngine
from nodebar.types import DistributionMode, Node, TextAlign


@pytest.mark.unit
class TestSetNodes:
    """Tests for set_nodes"""

    def test_empty_rejected(self, make_engine):
        engine = make_engine()
        with pytest.raises(InvalidInputError):
            engine.set_nodes([])

    def test_none_rejected(self, make_engine):
        engine = make_engine()
        with pytest.raises(InvalidInputError):
            engine.set_nodes(None)

    def test_rejected_call_keeps_previous_nodes(self, make_engine, three_nodes):
        engine = make_engine()
        engine.set_nodes(three_nodes)
        with pytest.raises(InvalidInputError):
            engine.set_nodes([])
        assert len(engine.nodes) == 3

    def test_replaces_previous_nodes(self, make_engine, three_nodes):
        engine = make_engine()
        engine.set_nodes(three_nodes)
        engine.set_nodes([Node("X")])
        assert engine.nodes == (Node("X"),)
        assert engine.part == 300

    def test_copies_input(self, make_engine, three_nodes):
        """Mutating the caller's list does not change the engine"""
        engine = make_engine()
        engine.set_nodes(three_nodes)
        three_nodes.append(Node("D"))
        assert len(engine.nodes) == 3

    def test_resets_progress(self, make_engine, three_nodes):
        engine = make_engine()
        engine.set_nodes(three_nodes)
        engine.set_progress(3)
        engine.set_nodes(three_nodes)
        assert engine.progress == 0

    def test_requests_redraw(self, make_engine, three_nodes, invalidations):
        engine = make_engine()
        before = len(invalidations)
        engine.set_nodes(three_nodes)
        assert len(invalidations) == before + 1


@pytest.mark.unit
class TestSetProgress:
    """Tests for set_progress"""

    def test_noop_without_nodes(self, make_engine, invalidations):
        engine = make_engine()
        before = len(invalidations)
        engine.set_progress(2)
        assert engine.progress == 0
        assert engine.fill_rect is None
        assert len(invalidations) == before

    def test_around_scenario(self, make_engine):
        """W=300, n=3, spaceAround, progress 2"""
        engine = make_engine(width=340, padding_left=20, padding_right=20)
        engine.set_nodes([Node("a"), Node("b", offset=6), Node("c")])
        engine.set_progress(2)
        assert engine.part == 100
        assert engine.fill_rect.right == 20 + 2 * 100 - 50 + 6
        assert engine.fill_rect.left == 20

    def test_idempotent(self, make_engine, three_nodes):
        engine = make_engine()
        engine.set_nodes(three_nodes)
        engine.set_progress(2)
        first = engine.fill_rect
        engine.set_progress(2)
        assert engine.fill_rect == first

    @pytest.mark.parametrize("mode", list(DistributionMode))
    def test_monotonic(self, make_engine, mode):
        """Fill never shrinks as progress grows (non-negative offsets)"""
        engine = make_engine(width=500, mode=mode)
        engine.set_nodes([Node(str(i), offset=i * 3) for i in range(5)])
        rights = []
        for p in range(6):
            engine.set_progress(p)
            rights.append(engine.fill_rect.right)
        assert rights == sorted(rights)

    @pytest.mark.parametrize("mode", list(DistributionMode))
    def test_single_node(self, make_engine, mode):
        engine = make_engine(width=260, padding_left=10, padding_right=10, mode=mode)
        engine.set_nodes([Node("only", offset=3)])
        engine.set_progress(1)
        assert engine.fill_rect.right - engine.padding_left == 120 + 3

    def test_out_of_range_warns_and_extrapolates(self, make_engine, three_nodes):
        engine = make_engine(width=400, mode=DistributionMode.SPACE_EVENLY)
        engine.set_nodes(three_nodes)
        with pytest.warns(OutOfRangeProgressWarning):
            engine.set_progress(5)
        assert engine.progress == 5
        assert engine.fill_rect.right == 500

    def test_negative_progress_warns(self, make_engine, three_nodes):
        engine = make_engine()
        engine.set_nodes(three_nodes)
        with pytest.warns(OutOfRangeProgressWarning):
            engine.set_progress(-1)

    def test_in_range_does_not_warn(self, make_engine, three_nodes):
        engine = make_engine()
        engine.set_nodes(three_nodes)
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            for p in range(4):
                engine.set_progress(p)

    def test_fill_vertical_bounds(self, make_engine, three_nodes):
        """Bar is centered vertically with the configured thickness"""
        engine = make_engine(height=80, style=BarStyle(thickness_dp=6))
        engine.set_nodes(three_nodes)
        engine.set_progress(1)
        assert engine.fill_rect.top == 37
        assert engine.fill_rect.bottom == 43


@pytest.mark.unit
class TestDerivedGeometry:
    """Tests for geometry recomputed on demand"""

    def test_pitch_follows_size_change(self, make_engine, three_nodes):
        """Resizing updates pitch without re-setting nodes"""
        engine = make_engine(width=300)
        engine.set_nodes(three_nodes)
        engine.set_size(600, 100)
        assert engine.part == 200

    def test_fill_follows_size_change(self, make_engine, three_nodes):
        engine = make_engine(width=300)
        engine.set_nodes(three_nodes)
        engine.set_progress(1)
        engine.set_size(600, 100)
        assert engine.fill_rect.right == 100

    def test_mode_change(self, make_engine):
        engine = make_engine(width=300)
        engine.set_nodes([Node(), Node(), Node(), Node()])
        engine.set_mode('spaceBetween')
        assert engine.part == 100
        assert engine.anchor_x(3) == 300

    def test_unknown_mode_rejected(self, make_engine):
        engine = make_engine()
        with pytest.raises(InvalidInputError):
            engine.set_mode('spaceEverywhere')

    def test_part_zero_without_nodes(self, make_engine):
        assert make_engine().part == 0

    def test_usable_width_clamped(self, make_engine):
        engine = make_engine(width=100, padding_left=80, padding_right=40)
        assert engine.usable_width == 0

    def test_clamp_warning_logged_once(self, make_engine, caplog):
        """Over-padding is reported when the size is set, not on every read"""
        with caplog.at_level(logging.WARNING, logger='nodebar.layout.engine'):
            engine = make_engine(width=100, padding_left=80, padding_right=40)
            engine.set_nodes([Node("a"), Node("b")])
            engine.set_progress(1)
            engine.layout()
        clamped = [r for r in caplog.records if 'clamped' in r.getMessage()]
        assert len(clamped) == 1

    def test_negative_size_rejected(self, make_engine):
        engine = make_engine()
        with pytest.raises(InvalidInputError):
            engine.set_size(-1, 10)

    def test_anchor_includes_padding_not_offset(self, make_engine):
        engine = make_engine(width=420, padding_left=20, mode=DistributionMode.SPACE_EVENLY)
        engine.set_nodes([Node("a", offset=4), Node("b"), Node("c")])
        assert engine.anchor_x(0) == 120
        assert engine.node_x(0) == 124

    def test_icon_position_centered(self, make_engine):
        engine = make_engine(width=300, height=100)
        engine.set_nodes([Node("a", offset=-2)])
        assert engine.icon_position(0, 20, 10) == (150 - 2 - 10, 45)

    def test_label_bottom(self, make_engine):
        engine = make_engine(height=100, style=BarStyle(text_margin_dp=8))
        engine.set_nodes([Node("a", offset=5)])
        assert engine.label_position(0) == (155, 58)

    def test_label_top(self, make_engine):
        engine = make_engine(height=100, style=BarStyle(text_margin_dp=8, text_align=TextAlign.TOP))
        engine.set_nodes([Node("a", offset=5)])
        assert engine.label_position(0) == (155, 42)

    def test_is_active(self, make_engine, three_nodes):
        engine = make_engine()
        engine.set_nodes(three_nodes)
        engine.set_progress(2)
        assert [engine.is_active(i) for i in range(3)] == [True, True, False]

    def test_gradient_spans_fill(self, make_engine, three_nodes):
        engine = make_engine(style=BarStyle(start_color='red', end_color='blue'))
        engine.set_nodes(three_nodes)
        engine.set_progress(3)
        gradient, rect = engine.gradient, engine.fill_rect
        assert (gradient.x0, gradient.y0, gradient.x1, gradient.y1) == rect.as_tuple()
        assert (gradient.start_color, gradient.end_color) == ('red', 'blue')

    def test_density_scales_thickness(self, make_engine, three_nodes):
        engine = make_engine(height=100, style=BarStyle.high_density(2.0))
        engine.set_nodes(three_nodes)
        assert engine.fill_rect.height == 20


@pytest.mark.unit
class TestLayoutSnapshot:
    """Tests for layout()"""

    def test_requires_nodes(self):
        with pytest.raises(InvalidInputError):
            LayoutEngine().layout()

    def test_snapshot(self, make_engine):
        engine = make_engine(width=300, mode=DistributionMode.SPACE_BETWEEN)
        engine.set_nodes([Node("a"), Node("b"), Node("c"), Node("d", offset=-5)])
        engine.set_progress(3)
        result = engine.layout()
        assert result.part == 100
        assert result.n_nodes == 4
        assert result.n_active == 3
        assert [p.anchor_x for p in result.nodes] == [0, 100, 200, 300]
        assert result.nodes[3].x == 295
        assert result.fill.right == 200

    def test_to_frame(self, make_engine, three_nodes):
        engine = make_engine()
        engine.set_nodes(three_nodes)
        engine.set_progress(1)
        frame = engine.layout().to_frame()
        assert list(frame.columns) == ['index', 'text', 'anchor_x', 'x', 'label_y', 'active']
        assert frame['text'].tolist() == ['A', 'B', 'C']
        assert frame['active'].tolist() == [True, False, False]
