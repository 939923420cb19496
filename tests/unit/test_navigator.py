from analysis_client.navigation.models import OutlineEntry
from analysis_client.navigation.navigator import ReactiveNavigator
from analysis_client.orchestrator.context import RenderEventKind, SessionContext
from analysis_client.surface.render_surface import RenderSurface


def _surface(*parts: str) -> RenderSurface:
    surface = RenderSurface()
    for part in parts:
        surface.append(part)
    return surface


class TestRebuild:
    def test_top_level_heading_selects_second_level(self) -> None:
        surface = _surface("<h1>Report</h1>", "<h2>A</h2><h3>a.1</h3>", "<h2>B</h2>", "<h2>C</h2>")

        entries = ReactiveNavigator().rebuild(surface)

        assert entries == [
            OutlineEntry(identifier="section-0", label="A", position=0),
            OutlineEntry(identifier="section-1", label="B", position=1),
            OutlineEntry(identifier="section-2", label="C", position=2),
        ]

    def test_without_top_level_heading_selects_third_level(self) -> None:
        surface = _surface("<h2>ignored</h2><h3>one</h3><h3>two</h3>")

        entries = ReactiveNavigator().rebuild(surface)

        assert [e.label for e in entries] == ["one", "two"]

    def test_no_matching_headings_hides_outline(self) -> None:
        navigator = ReactiveNavigator()

        entries = navigator.rebuild(_surface("<h1>Report</h1><p>nothing</p>"))

        assert entries == []
        assert navigator.visible is False

    def test_existing_identifiers_are_kept(self) -> None:
        surface = _surface('<h1>R</h1><h2 id="summary">Summary</h2><h2>Next</h2>')

        entries = ReactiveNavigator().rebuild(surface)

        assert [e.identifier for e in entries] == ["summary", "section-1"]

    def test_writes_identifiers_back_to_surface(self) -> None:
        surface = _surface("<h1>R</h1>", "<h2>A</h2>")

        ReactiveNavigator().rebuild(surface)

        assert '<h2 id="section-0">A</h2>' in surface.markup

    def test_identifiers_follow_position(self) -> None:
        navigator = ReactiveNavigator()
        surface = _surface("<h3>first</h3>")
        navigator.rebuild(surface)

        surface.replace("<h3>new</h3><h3>first</h3>")
        entries = navigator.rebuild(surface)

        assert [(e.identifier, e.label) for e in entries] == [
            ("section-0", "new"),
            ("section-1", "first"),
        ]


class TestRenderNotifications:
    def test_rebuilds_on_every_notification(self) -> None:
        context = SessionContext()
        navigator = ReactiveNavigator()
        navigator.attach(context)

        context.surface.append("<h3>one</h3>")
        context.notify(RenderEventKind.FRAGMENT)
        assert len(navigator.entries) == 1

        context.surface.append("<h3>two</h3>")
        context.notify(RenderEventKind.FRAGMENT)
        assert len(navigator.entries) == 2

        context.surface.clear()
        context.notify(RenderEventKind.CLEARED)
        assert navigator.visible is False


class TestScroll:
    def test_marks_last_heading_past_threshold(self) -> None:
        navigator = ReactiveNavigator(active_threshold_px=100)
        navigator.rebuild(_surface("<h3>a</h3><h3>b</h3><h3>c</h3>"))

        active = navigator.on_scroll([-400, 80, 600])

        assert active == "section-1"
        assert navigator.active_identifier == "section-1"

    def test_nothing_active_above_first_heading(self) -> None:
        navigator = ReactiveNavigator()
        navigator.rebuild(_surface("<h3>a</h3>"))

        assert navigator.on_scroll([350]) is None

    def test_active_cleared_when_entry_disappears(self) -> None:
        navigator = ReactiveNavigator()
        surface = _surface("<h3>a</h3><h3>b</h3>")
        navigator.rebuild(surface)
        navigator.on_scroll([0, 0])

        surface.replace("<h3>only</h3>")
        navigator.rebuild(surface)

        assert navigator.active_identifier is None


class TestCollapsed:
    def test_collapse_flag(self) -> None:
        navigator = ReactiveNavigator()
        assert navigator.collapsed is False
        navigator.set_collapsed(True)
        assert navigator.collapsed is True
