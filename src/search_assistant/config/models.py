"""Pydantic configuration models for the search assistant."""

from pydantic import BaseModel, Field

from search_assistant.widget.view import ViewOptions

# ============================================================
# Service Config
# ============================================================


class ServiceConfig(BaseModel):
    """Configuration for the HTTP query service."""

    base_url: str = "http://localhost:5555"
    timeout_seconds: float = Field(default=30.0, gt=0)

    model_config = {"frozen": True}


# ============================================================
# Widget Config
# ============================================================


class WidgetConfig(BaseModel):
    """Text, assets and rendering policy of the widget."""

    title: str = "Article Search Assistant"
    prompt: str = "Ask a public health question to find relevant article(s)"
    placeholder: str = "Type your question here..."
    icon_src: str = "./widget/message-icon.svg"
    summary_toggle: bool = True
    summary_label: str = "Include a computer-generated summary"
    trust_description_markup: bool = False

    model_config = {"frozen": True}

    def to_view_options(self) -> ViewOptions:
        return ViewOptions(
            title=self.title,
            prompt=self.prompt,
            placeholder=self.placeholder,
            icon_src=self.icon_src,
            summary_toggle=self.summary_toggle,
            summary_label=self.summary_label,
        )


# ============================================================
# Logging Config
# ============================================================


class LoggingConfig(BaseModel):
    """Configuration for per-submission JSON logging."""

    enabled: bool = False
    log_dir: str = "logs"

    model_config = {"frozen": True}


# ============================================================
# Root Config
# ============================================================


class AssistantConfig(BaseModel):
    """Root configuration for the search assistant."""

    service: ServiceConfig = Field(default_factory=ServiceConfig)
    widget: WidgetConfig = Field(default_factory=WidgetConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = {"frozen": True}
