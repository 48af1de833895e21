from jacks.screens import keys
from jacks.screens.navigation import EXIT, NOOP, REFRESH, KeyEvent, NavResponse, Renderer, Screen, ScreenKind
from jacks.screens.text import ABOUT_US, ABOUT_US_TEXT, FOOTER_ABOUT


class AboutUsScreen(Screen):
    kind = ScreenKind.about_us

    def __init__(self, text: str = ABOUT_US_TEXT) -> None:
        self.lines = text.split("\n")
        self.scroll_offset = 0
        # Unknown until the first render; assume everything fits.
        self.visible_height = len(self.lines)

    @property
    def max_scroll(self) -> int:
        return max(len(self.lines) - self.visible_height, 0)

    def process_input(self, event: KeyEvent) -> NavResponse:
        if not event.is_press:
            return NOOP
        if event.key in keys.QUIT:
            return EXIT
        if event.key in keys.MAIN_MENU:
            return NavResponse.nav_to(ScreenKind.menu)
        if event.key in keys.UP:
            if self.scroll_offset == 0:
                return NOOP
            self.scroll_offset -= 1
            return REFRESH
        if event.key in keys.DOWN:
            if self.scroll_offset >= self.max_scroll:
                return NOOP
            self.scroll_offset += 1
            return REFRESH
        if event.key in keys.RESIZE:
            return REFRESH
        return NOOP

    def render(self, renderer: Renderer) -> None:
        screen = renderer.area()
        renderer.render_border(screen)
        header, top, content, bottom, footer = screen.inner().split_rows([3, 1, None, 1, 1])
        renderer.render_text(ABOUT_US, header, highlight=True)

        self.visible_height = max(content.height, 1)
        self.scroll_offset = min(self.scroll_offset, self.max_scroll)
        if self.scroll_offset > 0:
            renderer.render_text("↑", top)
        if self.scroll_offset < self.max_scroll:
            renderer.render_text("↓", bottom)

        visible = self.lines[self.scroll_offset:self.scroll_offset + self.visible_height]
        renderer.render_text("\n".join(visible), content)
        renderer.render_text(FOOTER_ABOUT, footer)
