"""Rasterize highlighted code into a stylized card image."""

import io
import logging
from dataclasses import dataclass, replace
from typing import Optional, Tuple, Union

from PIL import Image, ImageDraw, ImageFilter, ImageFont
from pygments import highlight
from pygments.formatters import ImageFormatter
from pygments.formatters.img import FontNotFound
from pygments.styles import get_style_by_name
from pygments.util import ClassNotFound

from ..config import SCALE_MAX, SCALE_MIN, CardConfig
from ..exceptions import RenderError
from ..language_detection import LanguageTag
from .highlighter import get_lexer
from .themes import CardTheme, get_theme

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CardOptions:
    """Layout options for a card. Sizes are logical pixels, before scaling."""

    font_size: int = 14
    theme: str = "midnight"
    scale: int = 2
    padding: int = 32
    min_width: int = 480
    line_numbers: bool = False
    window_controls: bool = True
    title: Optional[str] = None
    font_name: Optional[str] = None

    def __post_init__(self):
        CardConfig.validate_font_size(self.font_size)
        if not SCALE_MIN <= self.scale <= SCALE_MAX:
            raise ValueError(f"Scale must be between {SCALE_MIN} and {SCALE_MAX}")
        if self.padding < 0 or self.min_width < 0:
            raise ValueError("Padding and minimum width cannot be negative")
        get_theme(self.theme)

    @classmethod
    def from_config(cls, config: CardConfig, **overrides) -> "CardOptions":
        """Build options from a CardConfig, letting non-None overrides win."""
        options = cls(
            font_size=config.font_size,
            theme=config.theme,
            scale=config.scale,
            padding=config.padding,
            line_numbers=config.line_numbers,
            font_name=config.font_name,
        )
        changes = {key: value for key, value in overrides.items() if value is not None}
        return replace(options, **changes) if changes else options

    @property
    def card_theme(self) -> CardTheme:
        return get_theme(self.theme)


@dataclass
class RenderedCard:
    """A finished card image."""

    image: Image.Image
    scale: int

    @property
    def width(self) -> int:
        return self.image.width

    @property
    def height(self) -> int:
        return self.image.height

    @property
    def logical_size(self) -> Tuple[int, int]:
        return self.width // self.scale, self.height // self.scale

    def to_png(self) -> bytes:
        buffer = io.BytesIO()
        dpi = 72 * self.scale
        self.image.save(buffer, format="PNG", dpi=(dpi, dpi))
        return buffer.getvalue()


def _vertical_gradient(size: Tuple[int, int], colors: Tuple[str, str]) -> Image.Image:
    top = Image.new("RGBA", size, colors[0])
    bottom = Image.new("RGBA", size, colors[1])
    mask = Image.linear_gradient("L").resize(size)
    return Image.composite(bottom, top, mask)


class CardRenderer:
    """Turn code into a card: gradient backdrop, window chrome, highlighted code."""

    WINDOW_RADIUS = 12
    CODE_MARGIN = 20
    TITLE_BAR_HEIGHT = 36
    CONTROL_DIAMETER = 12
    CONTROL_GAP = 8
    CONTROL_COLORS = ("#ff5f56", "#ffbd2e", "#27c93f")
    SHADOW_OFFSET = 8
    SHADOW_BLUR = 16
    TITLE_FONT_SIZE = 13

    def rasterize_code(
        self,
        code: str,
        language: Union[LanguageTag, str],
        options: CardOptions,
    ) -> Image.Image:
        """
        Highlight and rasterize ``code`` with Pygments' ImageFormatter.

        Raises:
            RenderError: If no font can be loaded or the image cannot be built
        """
        scale = options.scale
        style = options.card_theme.style
        formatter_options = dict(
            style=style,
            font_size=options.font_size * scale,
            line_pad=max(2, options.font_size // 4) * scale,
            image_pad=0,
            image_format="png",
            line_numbers=options.line_numbers,
            line_number_separator=False,
            line_number_fg="#7f848e",
            line_number_bg=self.window_color(style),
            line_number_pad=6 * scale,
        )
        if options.font_name:
            formatter_options["font_name"] = options.font_name

        try:
            formatter = ImageFormatter(**formatter_options)
            data = highlight(code.rstrip() or " ", get_lexer(language), formatter)
            return Image.open(io.BytesIO(data)).convert("RGBA")
        except FontNotFound as e:
            raise RenderError(f"No usable monospace font found: {e}") from e
        except (OSError, ValueError) as e:
            raise RenderError(f"Could not rasterize code: {e}") from e

    @staticmethod
    def window_color(style: str) -> str:
        try:
            return get_style_by_name(style).background_color or "#1e1e1e"
        except ClassNotFound:
            return "#1e1e1e"

    def _title_font(self, scale: int) -> ImageFont.ImageFont:
        return ImageFont.load_default(size=self.TITLE_FONT_SIZE * scale)

    def compose(self, code_image: Image.Image, options: CardOptions) -> RenderedCard:
        """Place an already rasterized code image inside the card frame."""
        scale = options.scale
        theme = options.card_theme
        pad = options.padding * scale
        margin = self.CODE_MARGIN * scale
        has_bar = options.window_controls or bool(options.title)
        bar = self.TITLE_BAR_HEIGHT * scale if has_bar else margin

        window_w = max(code_image.width + 2 * margin, options.min_width * scale - 2 * pad)
        window_h = bar + code_image.height + margin
        size = (window_w + 2 * pad, window_h + 2 * pad)
        window_box = (pad, pad, pad + window_w - 1, pad + window_h - 1)
        radius = self.WINDOW_RADIUS * scale

        canvas = _vertical_gradient(size, theme.background)

        shadow = Image.new("RGBA", size, (0, 0, 0, 0))
        offset = self.SHADOW_OFFSET * scale
        ImageDraw.Draw(shadow).rounded_rectangle(
            (window_box[0], window_box[1] + offset, window_box[2], window_box[3] + offset),
            radius=radius,
            fill=(0, 0, 0, 110),
        )
        shadow = shadow.filter(ImageFilter.GaussianBlur(self.SHADOW_BLUR * scale))
        canvas = Image.alpha_composite(canvas, shadow)

        draw = ImageDraw.Draw(canvas)
        draw.rounded_rectangle(window_box, radius=radius, fill=self.window_color(theme.style))

        if options.window_controls:
            diameter = self.CONTROL_DIAMETER * scale
            top = pad + (bar - diameter) // 2
            for index, color in enumerate(self.CONTROL_COLORS):
                left = pad + margin + index * (diameter + self.CONTROL_GAP * scale)
                draw.ellipse((left, top, left + diameter, top + diameter), fill=color)

        if options.title:
            font = self._title_font(scale)
            box = draw.textbbox((0, 0), options.title, font=font)
            text_w, text_h = box[2] - box[0], box[3] - box[1]
            position = (pad + (window_w - text_w) // 2, pad + (bar - text_h) // 2 - box[1])
            draw.text(position, options.title, font=font, fill=theme.title_color)

        canvas.paste(code_image, (pad + margin, pad + bar), code_image)
        logger.debug(f"Composed card {canvas.width}x{canvas.height} at scale {scale}")
        return RenderedCard(image=canvas, scale=scale)

    def render(
        self,
        code: str,
        language: Union[LanguageTag, str],
        options: Optional[CardOptions] = None,
    ) -> RenderedCard:
        """
        Render ``code`` as a card.

        Args:
            code: Snippet text, already formatted if formatting is wanted
            language: Tag selecting the highlighting rules
            options: Layout options, defaults to CardOptions()

        Returns:
            RenderedCard holding the final image

        Raises:
            RenderError: If rasterization fails
        """
        options = options or CardOptions()
        code_image = self.rasterize_code(code, language, options)
        try:
            return self.compose(code_image, options)
        except (OSError, ValueError) as e:
            raise RenderError(f"Could not compose card: {e}") from e
