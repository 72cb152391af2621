import sys
import time
from pathlib import Path
from typing import Any, Awaitable, Callable, List, Optional, Pattern, TypeVar, Union

from playwright.async_api import Download, FrameLocator, Locator, Page, Request

from automation_exercise.common.errors import (
    ConditionTimeoutError,
    DragSourceNotVisibleError,
    FrameResolutionError,
    MissingTextContentError,
    NoElementsFoundError,
    PreconditionError,
)
from automation_exercise.ui.base.action_options import (
    AlertOptions,
    ClickOptions,
    ClipboardOptions,
    CountElementsOptions,
    DoubleClickOptions,
    DragAndDropOptions,
    FileDownloadOptions,
    FileUploadOptions,
    GetAllTextsOptions,
    GetTextOptions,
    HoverOptions,
    IFrameOptions,
    StateCheckOptions,
    ToElement,
    ToPoint,
    TypeOptions,
    WaitForConditionOptions,
    WaitForElementOptions,
    WaitForRequestOptions,
    as_drag_target,
    resolve_options,
)
from automation_exercise.ui.base.retry import attempt, sleep_ms

T = TypeVar("T")

UrlMatcher = Union[str, Pattern[str], Callable[[Request], bool]]

MODIFIER = "Meta" if sys.platform == "darwin" else "Control"


def _css_string(value: str) -> str:
    """Escape a value for use inside a double-quoted CSS attribute selector."""
    return value.replace("\\", "\\\\").replace('"', '\\"')


class UIBase:
    """
    Retry-aware interactions shared by every page object.

    Each method runs one Playwright call up to ``options.retries`` times
    and either returns its natural result or re-raises the error of the last
    attempt unchanged, so callers can still catch Playwright's own types.
    Precondition errors (see ``automation_exercise.common.errors``) are
    raised immediately. The only failure this class invents is
    ``ConditionTimeoutError`` from ``wait_for_condition``.
    """

    def __init__(self, page: Page):
        self.page = page

    async def pause(self, delay_ms: float) -> None:
        """Sleep between attempts. Tests replace it to keep time out of the loop."""
        await sleep_ms(delay_ms)

    async def _run(
        self,
        action: Callable[[], Awaitable[T]],
        retries: int,
        delay_ms: Optional[float] = None,
        accept: Optional[Callable[[T], bool]] = None,
        ) -> T:
        outcome = await attempt(action, retries, delay_ms=delay_ms, accept=accept, pause=self.pause)
        return outcome.unwrap()

    # ---------- BASIC ACTIONS ----------

    async def click(self, locator: Locator, options: Optional[ClickOptions] = None) -> None:
        opts = resolve_options(options, ClickOptions)

        async def action():
            await locator.click(timeout=opts.timeout, force=opts.force)
            if opts.wait_for is not None:
                await opts.wait_for.wait_for(state="visible", timeout=opts.timeout)

        await self._run(action, opts.retries)

    async def double_click(self, locator: Locator, options: Optional[DoubleClickOptions] = None) -> None:
        opts = resolve_options(options, DoubleClickOptions)

        async def action():
            await locator.dblclick(timeout=opts.timeout, force=opts.force)
            if opts.wait_for is not None:
                await opts.wait_for.wait_for(state="visible", timeout=opts.timeout)

        await self._run(action, opts.retries)

    async def type(self, locator: Locator, text: str, options: Optional[TypeOptions] = None) -> None:
        opts = resolve_options(options, TypeOptions)

        async def action():
            if opts.clear:
                await locator.fill("", timeout=opts.timeout)
            await locator.press_sequentially(text, delay=opts.delay, timeout=opts.timeout)
            if opts.press_enter:
                await locator.press("Enter", timeout=opts.timeout)
            if opts.wait_for is not None:
                await opts.wait_for.wait_for(state="visible", timeout=opts.timeout)

        await self._run(action, opts.retries)

    async def type_and_enter(self, locator: Locator, text: str, options: Optional[TypeOptions] = None) -> None:
        opts = resolve_options(options, TypeOptions)
        await self.type(
            locator,
            text,
            TypeOptions(
                timeout=opts.timeout,
                retries=opts.retries,
                clear=opts.clear,
                delay=opts.delay,
                press_enter=True,
                wait_for=opts.wait_for,
            ),
        )

    async def clear(self, locator: Locator, options: Optional[TypeOptions] = None) -> None:
        opts = resolve_options(options, TypeOptions)
        await self._run(lambda: locator.fill("", timeout=opts.timeout), opts.retries)

    async def get_text(self, locator: Locator, options: Optional[GetTextOptions] = None) -> str:
        opts = resolve_options(options, GetTextOptions)

        async def action() -> str:
            if opts.wait_for is not None:
                await opts.wait_for.wait_for(state="visible", timeout=opts.timeout)
            text = await locator.text_content(timeout=opts.timeout)
            if text is None:
                raise MissingTextContentError("Element has no text content")
            return text.strip() if opts.trim else text

        return await self._run(action, opts.retries)

    async def get_all_texts(self, locator: Locator, options: Optional[GetAllTextsOptions] = None) -> List[str]:
        """
        Collect the text of every element matched by ``locator``.

        While fewer than ``min_count`` texts come back and attempts remain,
        wait ``interval_ms`` and collect again; the last collection is
        returned whatever its size. Elements without text are skipped.
        """
        opts = resolve_options(options, GetAllTextsOptions)

        async def action() -> List[str]:
            texts: List[str] = []
            count = await locator.count()
            for index in range(count):
                text = await locator.nth(index).text_content(timeout=opts.timeout)
                if text is not None:
                    texts.append(text.strip() if opts.trim else text)
            return texts

        return await self._run(
            action,
            opts.retries,
            delay_ms=opts.interval_ms,
            accept=lambda texts: len(texts) >= opts.min_count,
        )

    async def count_elements(self, locator: Locator, options: Optional[CountElementsOptions] = None) -> int:
        opts = resolve_options(options, CountElementsOptions)
        target = locator.filter(visible=True) if opts.visible_only else locator
        return await self._run(target.count, opts.retries)

    # ---------- STATE CHECKS ----------

    async def is_visible(self, locator: Locator, options: Optional[StateCheckOptions] = None) -> bool:
        opts = resolve_options(options, StateCheckOptions)
        return await self._run(lambda: locator.is_visible(timeout=opts.timeout), opts.retries)

    async def is_enabled(self, locator: Locator, options: Optional[StateCheckOptions] = None) -> bool:
        opts = resolve_options(options, StateCheckOptions)
        return await self._run(lambda: locator.is_enabled(timeout=opts.timeout), opts.retries)

    async def is_disabled(self, locator: Locator, options: Optional[StateCheckOptions] = None) -> bool:
        """Negation of is_enabled: a detached element is not told apart from an enabled one."""
        return not await self.is_enabled(locator, options)

    async def is_checked(self, locator: Locator, options: Optional[StateCheckOptions] = None) -> bool:
        opts = resolve_options(options, StateCheckOptions)
        return await self._run(lambda: locator.is_checked(timeout=opts.timeout), opts.retries)

    async def is_unchecked(self, locator: Locator, options: Optional[StateCheckOptions] = None) -> bool:
        return not await self.is_checked(locator, options)

    # ---------- LOCATOR HELPERS ----------

    def filter_by_text(self, locator: Locator, text: str) -> Locator:
        return locator.filter(has_text=text)

    async def get_value_by_label(
        self,
        items_locator: Locator,
        label: str,
        value_selector: str,
        options: Optional[GetTextOptions] = None,
        ) -> str:
        """
        Read a value from a label/value list.

        Args:
            items_locator: Locator for the rows of the list
            label: Text identifying the row
            value_selector: Selector of the value, relative to the row
            options: Passed to get_text
        """
        item = self.filter_by_text(items_locator, label)
        return await self.get_text(item.locator(value_selector), options)

    # ---------- PAGE ACTIONS ----------

    async def reload_page(self) -> None:
        await self.page.reload()
        await self.page.wait_for_load_state("networkidle")

    async def set_session_token(self, token: str, page_url: Optional[str] = None) -> None:
        """
        Store a session token (e.g. obtained through the API) in sessionStorage and reload.

        Args:
            token: Authentication token
            page_url: Page to open first, so the token lands on the right origin
        """
        if page_url:
            await self.page.goto(page_url)
        await self.page.evaluate("token => sessionStorage.setItem('token', token)", token)
        await self.reload_page()

    async def drag_and_drop(
        self,
        source: Locator,
        target: Any,
        options: Optional[DragAndDropOptions] = None,
        ) -> None:
        """
        Drag ``source`` onto an element or to page coordinates.

        Args:
            source: Element to drag
            target: A Locator / ToElement, or a point as ToPoint, ``(x, y)``
                or ``{"x": .., "y": ..}``
            options: timeout, steps, delay_ms and retries
        """
        opts = resolve_options(options, DragAndDropOptions)
        drop = as_drag_target(target)

        if isinstance(drop, ToPoint):
            async def action():
                await self._drag_to_point(source, drop, opts)
        else:
            async def action():
                await self._drag_to_element(source, drop, opts)

        await self._run(action, opts.retries)

    async def _drag_to_element(self, source: Locator, drop: ToElement, opts: DragAndDropOptions) -> None:
        await source.drag_to(drop.locator, timeout=opts.timeout)
        if opts.delay_ms:
            await self.pause(opts.delay_ms)

    async def _drag_to_point(self, source: Locator, drop: ToPoint, opts: DragAndDropOptions) -> None:
        # drag_to has no raw-coordinate form, so drive the mouse directly
        box = await source.bounding_box(timeout=opts.timeout)
        if not box:
            raise DragSourceNotVisibleError("Source element not visible for drag")
        start_x = box["x"] + box["width"] / 2
        start_y = box["y"] + box["height"] / 2

        mouse = self.page.mouse
        await mouse.move(start_x, start_y)
        await mouse.down()
        if opts.delay_ms:
            await self.pause(opts.delay_ms)
        await mouse.move(drop.x, drop.y, steps=opts.steps or 1)
        await mouse.up()
        if opts.delay_ms:
            await self.pause(opts.delay_ms)

    async def scroll_to_element(self, locator: Locator, options: Optional[HoverOptions] = None) -> None:
        opts = resolve_options(options, HoverOptions)
        await self._run(lambda: locator.scroll_into_view_if_needed(timeout=opts.timeout), opts.retries)

    async def hover(self, locator: Locator, options: Optional[HoverOptions] = None) -> None:
        opts = resolve_options(options, HoverOptions)
        await self._run(lambda: locator.hover(timeout=opts.timeout, force=opts.force), opts.retries)

    # ---------- CLIPBOARD ACTIONS ----------

    async def copy(self, locator: Locator, options: Optional[ClipboardOptions] = None) -> None:
        """Focus ``locator`` by clicking it, then press the platform copy shortcut."""
        await self._click_and_press(locator, f"{MODIFIER}+C", options)

    async def paste(self, locator: Locator, options: Optional[ClipboardOptions] = None) -> None:
        await self._click_and_press(locator, f"{MODIFIER}+V", options)

    async def _click_and_press(self, locator: Locator, keys: str, options: Optional[ClipboardOptions]) -> None:
        opts = resolve_options(options, ClipboardOptions)

        async def action():
            await locator.click(timeout=opts.timeout)
            await self.page.keyboard.press(keys)

        await self._run(action, opts.retries)

    async def get_clipboard_text(self) -> str:
        # needs the clipboard-read permission on the browser context
        return await self.page.evaluate("() => navigator.clipboard.readText()")

    async def set_clipboard_text(self, text: str) -> None:
        await self.page.evaluate("text => navigator.clipboard.writeText(text)", text)

    # ---------- ALERT/MODAL ACTIONS ----------

    async def accept_alert(self, options: Optional[AlertOptions] = None) -> None:
        """Accept the next dialog the page opens."""
        opts = resolve_options(options, AlertOptions)

        async def handle(dialog):
            await dialog.accept()

        await self._run(self._once_dialog(handle), opts.retries)

    async def dismiss_alert(self, options: Optional[AlertOptions] = None) -> None:
        """Dismiss the next dialog the page opens."""
        opts = resolve_options(options, AlertOptions)

        async def handle(dialog):
            await dialog.dismiss()

        await self._run(self._once_dialog(handle), opts.retries)

    def _once_dialog(self, handler):
        async def register():
            self.page.once("dialog", handler)

        return register

    # ---------- FILE UPLOAD/DOWNLOAD ----------

    async def upload_file(
        self,
        locator: Locator,
        file_path: Union[str, Path],
        options: Optional[FileUploadOptions] = None,
        ) -> None:
        opts = resolve_options(options, FileUploadOptions)
        await self._run(lambda: locator.set_input_files(file_path, timeout=opts.timeout), opts.retries)

    async def download_file(self, locator: Locator, options: Optional[FileDownloadOptions] = None) -> Download:
        """Click ``locator`` and return the download it triggers."""
        opts = resolve_options(options, FileDownloadOptions)

        async def action() -> Download:
            async with self.page.expect_download(timeout=opts.timeout) as download_info:
                await locator.click(timeout=opts.timeout)
            return await download_info.value

        return await self._run(action, opts.retries)

    # ---------- IFRAMES ----------

    async def switch_to_iframe(self, iframe_locator: Locator, options: Optional[IFrameOptions] = None) -> FrameLocator:
        """
        Resolve a FrameLocator for an iframe element.

        The frame is addressed by its ``name`` attribute, falling back to
        ``id``; an iframe with neither raises FrameResolutionError.
        """
        opts = resolve_options(options, IFrameOptions)

        async def action() -> FrameLocator:
            await iframe_locator.wait_for(state="visible", timeout=opts.timeout)
            name = await iframe_locator.get_attribute("name", timeout=opts.timeout)
            if name:
                return self.page.frame_locator(f'iframe[name="{_css_string(name)}"]')
            frame_id = await iframe_locator.get_attribute("id", timeout=opts.timeout)
            if frame_id:
                return self.page.frame_locator(f'iframe[id="{_css_string(frame_id)}"]')
            raise FrameResolutionError("Iframe must have a name or id attribute to use frame_locator.")

        return await self._run(action, opts.retries)

    async def find_in_iframe(
        self,
        iframe_locator: Locator,
        child: Union[str, Locator],
        options: Optional[IFrameOptions] = None,
        ) -> Locator:
        frame = await self.switch_to_iframe(iframe_locator, options)
        return frame.locator(child)

    # ---------- NETWORK / WAITS ----------

    async def wait_for_request(
        self,
        url_or_predicate: Optional[UrlMatcher] = None,
        options: Optional[WaitForRequestOptions] = None,
        ) -> Request:
        """Wait for the next request matching a URL glob, regex or predicate."""
        opts = resolve_options(options, WaitForRequestOptions)
        matcher = url_or_predicate if url_or_predicate is not None else opts.predicate
        if matcher is None:
            raise PreconditionError("wait_for_request needs a URL, pattern or predicate")

        async def action() -> Request:
            async with self.page.expect_request(matcher, timeout=opts.timeout) as request_info:
                pass
            return await request_info.value

        return await self._run(action, opts.retries)

    async def wait_for_element(self, locator: Locator, options: Optional[WaitForElementOptions] = None) -> None:
        opts = resolve_options(options, WaitForElementOptions)
        await self._run(lambda: locator.wait_for(state=opts.state, timeout=opts.timeout), opts.retries)

    async def wait_for_element_to_disappear(
        self,
        locator: Locator,
        options: Optional[WaitForElementOptions] = None,
        ) -> None:
        opts = resolve_options(options, WaitForElementOptions)
        await self.wait_for_element(
            locator, WaitForElementOptions(timeout=opts.timeout, retries=opts.retries, state="detached")
        )

    async def wait_for_url_change(
        self,
        url_or_regex: Union[str, Pattern[str]],
        options: Optional[WaitForElementOptions] = None,
        ) -> None:
        opts = resolve_options(options, WaitForElementOptions)
        await self._run(lambda: self.page.wait_for_url(url_or_regex, timeout=opts.timeout), opts.retries)

    async def wait_for_network_idle(self, options: Optional[WaitForElementOptions] = None) -> None:
        opts = resolve_options(options, WaitForElementOptions)
        await self.page.wait_for_load_state("networkidle", timeout=opts.timeout)

    async def wait_for_navigation(self, options: Optional[WaitForElementOptions] = None) -> None:
        """Wait for the next main-frame navigation to finish."""
        opts = resolve_options(options, WaitForElementOptions)
        async with self.page.expect_navigation(timeout=opts.timeout):
            pass

    async def wait_for_condition(
        self,
        condition: Callable[[], Awaitable[bool]],
        options: Optional[WaitForConditionOptions] = None,
        ) -> None:
        """
        Poll ``condition`` until it returns True.

        Polling stops at whichever comes first: ``retries`` evaluations or
        ``timeout`` milliseconds of wall-clock time, with ``interval_ms``
        between evaluations.

        Raises:
            ConditionTimeoutError: if the condition never returned True
        """
        opts = resolve_options(options, WaitForConditionOptions)
        evaluations = 0
        deadline = time.monotonic() + opts.timeout / 1000

        while evaluations < opts.retries and time.monotonic() < deadline:
            evaluations += 1
            if await condition():
                return
            await self.pause(opts.interval_ms)

        raise ConditionTimeoutError(attempts=evaluations)

    # ---------- RETRY HELPER ----------

    async def retry_n_times(
        self,
        fn: Callable[[], Awaitable[T]],
        retries: int,
        delay_ms: Optional[float] = None,
        ) -> T:
        """Run any coroutine function up to ``retries`` times, pausing ``delay_ms`` between tries."""
        return await self._run(fn, retries, delay_ms=delay_ms)

    # ---------- LOCATOR GROUPS ----------

    async def wait_for_any_element_visible(
        self,
        locator: Locator,
        options: Optional[WaitForElementOptions] = None,
        ) -> None:
        """
        Succeed as soon as one element of the group reaches ``options.state``.

        Candidates are tried in document order; a candidate's failure is
        swallowed while others remain, and the last one's error is raised
        when none succeeds.
        """
        opts = resolve_options(options, WaitForElementOptions)

        async def action():
            count = await self._require_candidates(locator, "wait_for_any_element_visible")
            last_error: Optional[Exception] = None
            for index in range(count):
                try:
                    await locator.nth(index).wait_for(state=opts.state, timeout=opts.timeout)
                    return
                except Exception as e:
                    last_error = e
            raise last_error

        await self._run(action, opts.retries)

    async def wait_for_all_elements_visible(
        self,
        locator: Locator,
        options: Optional[WaitForElementOptions] = None,
        ) -> None:
        """Require every element of the group to reach ``options.state``; stop at the first that does not."""
        opts = resolve_options(options, WaitForElementOptions)

        async def action():
            count = await self._require_candidates(locator, "wait_for_all_elements_visible")
            for index in range(count):
                await locator.nth(index).wait_for(state=opts.state, timeout=opts.timeout)

        await self._run(action, opts.retries)

    async def _require_candidates(self, locator: Locator, operation: str) -> int:
        count = await locator.count()
        if count == 0:
            raise NoElementsFoundError(f"No elements found for {operation}")
        return count
