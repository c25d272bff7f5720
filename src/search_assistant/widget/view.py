"""The widget's element tree, built once at mount time."""

from dataclasses import dataclass

from search_assistant.data import MAX_QUERY_LENGTH
from search_assistant.render.nodes import Checkbox, Element, TextArea

ACTIVE_CLASS = "chat-widget-active"


@dataclass(frozen=True)
class ViewOptions:
    """Text and assets shown by the widget."""

    title: str = "Article Search Assistant"
    prompt: str = "Ask a public health question to find relevant article(s)"
    placeholder: str = "Type your question here..."
    icon_src: str = "./widget/message-icon.svg"
    summary_toggle: bool = True
    summary_label: str = "Include a computer-generated summary"


@dataclass
class WidgetView:
    """Typed references to every element the controller touches."""

    wrapper: Element
    launcher_frame: Element
    launcher: Element
    modal: Element
    close_button: Element
    input: TextArea
    summary_toggle: Checkbox | None
    submit_button: Element
    results: Element

    @property
    def is_open(self) -> bool:
        return self.modal.has_class(ACTIVE_CLASS)


def _button(label: str, text: str, *classes: str) -> Element:
    return Element(
        "button",
        classes=list(classes),
        attributes={
            "type": "button",
            "role": "button",
            "aria-label": label,
            "title": label,
        },
        children=[text] if text else [],
    )


def build_view(options: ViewOptions | None = None) -> WidgetView:
    """Construct the launcher and modal, closed, with an empty results area."""
    options = options or ViewOptions()

    wrapper = Element("div", classes=["chat-widget-wrapper"])
    launcher_frame = Element("div", classes=["chat-widget-button", ACTIVE_CLASS])
    modal = Element("div", classes=["chat-widget-modal"])
    wrapper.append(launcher_frame)
    wrapper.append(modal)

    open_label = f"Open {options.title.lower()}"
    launcher = _button(open_label, "")
    launcher.append(Element("img", attributes={"src": options.icon_src, "alt": open_label}))
    launcher_frame.append(launcher)

    title_bar = Element("div", classes=["chat-widget-modal-title"])
    title_bar.append(Element("h3", children=[options.title]))
    modal.append(title_bar)
    body = Element("div", classes=["chat-widget-modal-body"])
    modal.append(body)

    close_button = _button(f"Close {options.title.lower()}", "X", "chat-widget-exit")
    modal.append(close_button)

    body.append(Element("p", children=[options.prompt]))
    input_box = TextArea(
        "textarea",
        classes=["chat-widget-input"],
        attributes={"placeholder": options.placeholder, "maxlength": str(MAX_QUERY_LENGTH)},
        max_length=MAX_QUERY_LENGTH,
    )
    body.append(input_box)

    summary_toggle: Checkbox | None = None
    if options.summary_toggle:
        label = Element("label", classes=["chat-widget-summary-toggle"])
        summary_toggle = Checkbox("input", attributes={"type": "checkbox"})
        label.append(summary_toggle)
        label.append(options.summary_label)
        body.append(label)

    submit_button = _button("Search for relevant articles", "Search", "chat-widget-submit")
    body.append(submit_button)

    results = Element("div", classes=["chat-widget-results"], attributes={"aria-live": "polite"})
    body.append(results)

    return WidgetView(
        wrapper=wrapper,
        launcher_frame=launcher_frame,
        launcher=launcher,
        modal=modal,
        close_button=close_button,
        input=input_box,
        summary_toggle=summary_toggle,
        submit_button=submit_button,
        results=results,
    )
