"""
Configuration Schema for the Reader

Pydantic models defining the reader configuration structure.
All default presentation values (colors, flags, strings) are defined here.
Colors and images are opaque strings handed to the host as-is.
"""

from typing import Callable, Dict, List, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..direction import UNSET, LayoutDirection, resolve
from ..listeners import ContentClickRegistry

T = TypeVar('T')

Translate = Callable[[str], str]


class ColorPair(BaseModel):
    """Day and night variants of one theme color."""
    model_config = ConfigDict(extra='forbid')

    day: str = Field(description="Color used in day mode")
    night: Optional[str] = Field(None, description="Color used in night mode, defaults to the day color")

    def for_mode(self, night: bool = False) -> str:
        """Get the color for day or night mode."""
        if night and self.night is not None:
            return self.night
        return self.day


def _pair(day: str, night: Optional[str] = None):
    return Field(default_factory=lambda: ColorPair(day=day, night=night))


class ThemeColors(BaseModel):
    """Reader theme colors."""
    model_config = ConfigDict(extra='forbid', validate_assignment=True)

    tint: ColorPair = _pair('#e1bb00')
    menu_background: ColorPair = _pair('#ffffff', '#1e1e1e')
    menu_text: ColorPair = _pair('#000000')
    menu_text_selected: ColorPair = _pair('#e1bb00')
    menu_separator: ColorPair = _pair('#d7d7d7', '#80808033')
    background: ColorPair = _pair('#ffffff', '#131313')
    navigation_background: ColorPair = _pair('#ffffff', '#131313')
    media_overlay: Optional[str] = Field(
        None,
        description="Media overlay / text-to-speech highlight color, defaults to the day tint"
    )

    @field_validator(
        'tint', 'menu_background', 'menu_text', 'menu_text_selected',
        'menu_separator', 'background', 'navigation_background',
        mode='before'
    )
    @classmethod
    def expand_single_color(cls, v):
        """Accept a single color for both modes."""
        if isinstance(v, str):
            return ColorPair(day=v)
        return v

    def media_overlay_color(self) -> str:
        """Get the media overlay color, following the current tint unless overridden."""
        if self.media_overlay is not None:
            return self.media_overlay
        return self.tint.day

    def for_mode(self, night: bool = False) -> Dict[str, str]:
        """Get every theme color resolved for day or night mode."""
        colors = {
            name: value.for_mode(night)
            for name, value in self
            if isinstance(value, ColorPair)
        }
        colors['media_overlay'] = self.media_overlay_color()
        return colors


class FeatureFlags(BaseModel):
    """Independently toggled reader behaviors."""
    model_config = ConfigDict(extra='forbid', validate_assignment=True)

    can_change_direction: bool = Field(True, description="User may change the layout direction in the menu")
    can_change_font_style: bool = Field(True, description="User may change the font style in the menu")
    hide_navigation_on_tap: bool = Field(True, description="Hide the navigation bar when the user taps content")
    allow_sharing: bool = Field(True, description="Show sharing icons and options")
    enable_speech: bool = Field(True, description="Enable text to speech")
    display_title: bool = Field(False, description="Display the book title in the navigation bar")
    hide_page_indicator: bool = Field(False, description="Hide the page indicator")
    load_saved_position: bool = Field(True, description="Go to the saved position when a book opens")
    use_native_selection_menu: bool = Field(
        True,
        description="Use the reader's selection menu (highlight, define, share); "
                    "when False the host owns the shared menu"
    )
    preserve_default_quote_backgrounds: bool = Field(True, description="Keep the default quote image backgrounds")
    hide_bars: bool = Field(False, description="Hide the navigation bar and the bottom status view")


# Keys of LocalizedStrings that are never passed to the translator
UNTRANSLATED_STRINGS = frozenset({'highlights_date_format', 'share_web_link'})


class LocalizedStrings(BaseModel):
    """Display strings shown by the reader."""
    model_config = ConfigDict(extra='forbid')

    highlights_title: str = "Ghi chú"
    contents_title: str = "Nội dung"
    highlights_date_format: str = Field(
        "MMM dd, YYYY | HH:mm",
        description="Date format pattern for highlight timestamps"
    )
    highlight_menu: str = "Ghi chú"
    define_menu: str = "Định nghĩa"
    play_menu: str = "Bắt đầu"
    pause_menu: str = "Tạm dừng"
    font_menu_night: str = "Đêm"
    font_menu_day: str = "Ngày"
    player_menu_style: str = "Style"
    layout_horizontal: str = "Xem ngang"
    layout_vertical: str = "Xem dọc"
    reader_one_page_left: str = "Còn 1 trang"
    reader_many_pages_left: str = "Số trang còn lại"
    reader_many_minutes: str = "phút"
    reader_one_minute: str = "1 phút"
    reader_less_than_one_minute: str = "Ít hơn 1 phút"
    share_web_link: Optional[str] = Field(None, description="Link appended to shared content")
    share_chapter_subject: str = "Kiểm tra chương từ"
    share_highlight_subject: str = "Ghi chú từ"
    share_all_excerpts_from: str = "Tất cả các trích đoạn từ"
    share_by: str = "bởi"
    cancel: str = "Huỷ"
    share: str = "Chia sẻ"
    choose_existing: str = "Chọn sách có sẵn"
    take_photo: str = "Chụp ảnh"
    share_image_quote: str = "Chia sẻ ảnh ghi chú"
    share_text_quote: str = "Chia sẻ ghi chú"
    save: str = "Lưu"
    highlight_note: str = "Ghi chú"

    @classmethod
    def resolve(cls, translate: Optional[Translate] = None) -> "LocalizedStrings":
        """Create the default strings, passing each one through the translator once."""
        strings = cls()
        if translate is None:
            return strings

        translated = {}
        for name, value in strings:
            if name in UNTRANSLATED_STRINGS or value is None:
                translated[name] = value
            else:
                translated[name] = translate(value)
        return cls(**translated)


class StoreConfiguration(BaseModel):
    """Highlight store settings, passed unchanged to the persistence layer."""
    model_config = ConfigDict(extra='allow')

    schema_version: int = Field(2, description="Store schema version")
    location: Optional[str] = Field(None, description="Store location, None for the default store")


class QuoteImage(BaseModel):
    """Custom background for shared quote images."""
    model_config = ConfigDict(extra='forbid')

    background: str = Field(description="Background image reference")
    text_color: str = Field('#ffffff', description="Quote text color")
    background_color: Optional[str] = Field(None, description="Color drawn behind the image")
    alpha: float = Field(1.0, ge=0.0, le=1.0, description="Background image opacity")


class ReaderConfiguration(BaseModel):
    """Complete configuration of one reader session.

    Set fields between construction and first use; reader subsystems treat
    the configuration as read-only afterwards.
    """
    model_config = ConfigDict(extra='forbid', validate_assignment=True, arbitrary_types_allowed=True)

    identifier: Optional[str] = Field(
        None,
        description="Distinguishes reader instances; namespaces the saved user settings"
    )
    direction: LayoutDirection = Field(
        LayoutDirection.DEFAULT_VERTICAL,
        description="Layout direction, overridden by the user's choice if can_change_direction"
    )

    colors: ThemeColors = Field(default_factory=ThemeColors, description="Theme colors")
    features: FeatureFlags = Field(default_factory=FeatureFlags, description="Feature flags")
    strings: LocalizedStrings = Field(default_factory=LocalizedStrings, description="Display strings")
    store: StoreConfiguration = Field(default_factory=StoreConfiguration, description="Highlight store handle")

    quote_logo: Optional[str] = Field(None, description="Logo drawn on shared quote images")
    quote_backgrounds: List[QuoteImage] = Field(
        default_factory=list,
        description="Custom quote image backgrounds"
    )

    click_listeners: ContentClickRegistry = Field(
        default_factory=ContentClickRegistry,
        exclude=True,
        description="Listeners for clicks on rendered content"
    )

    @field_validator('direction', mode='before')
    @classmethod
    def parse_direction(cls, v):
        """Accept direction names in any spelling."""
        return LayoutDirection.parse(v)

    def resolve_direction(self, vertical: T, horizontal: T,
                          horizontal_with_vertical_content: T = UNSET) -> T:
        """Pick the candidate value for the configured direction.

        See ``reader_config.direction.resolve``; ``horizontal_with_vertical_content``
        defaults to ``vertical``.
        """
        return resolve(self.direction, vertical, horizontal, horizontal_with_vertical_content)

    def media_overlay_color(self) -> str:
        """Get the media overlay color."""
        return self.colors.media_overlay_color()
