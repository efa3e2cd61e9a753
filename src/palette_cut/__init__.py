from .box import Axis, ColorBox
from .colormap import ColorMap
from .errors import EmptyInputError, InvalidTargetCountError, QuantizationError
from .histogram import Histogram
from .models import PaletteResult, Swatch
from .pipeline import PaletteExtractor
from .quantizer import MedianCutQuantizer, QuantizerState, quantize
from .splitter import split_box

__all__ = [
    "Axis",
    "ColorBox",
    "ColorMap",
    "EmptyInputError",
    "Histogram",
    "InvalidTargetCountError",
    "MedianCutQuantizer",
    "PaletteExtractor",
    "PaletteResult",
    "QuantizationError",
    "QuantizerState",
    "Swatch",
    "quantize",
    "split_box",
]
