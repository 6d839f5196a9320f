# io_save_load.py
# load/save helpers; decoding & encoding are Pillow's

from PIL import Image
import numpy as np, pathlib as _p

from .buffer import PixelBuffer


def load_rgb(path: str) -> PixelBuffer:
    with Image.open(path) as im:
        return PixelBuffer.from_array(np.array(im.convert('RGB'), dtype=np.uint8))

def save_rgb(buffer: PixelBuffer, path: str) -> str:
    _p.Path(path).parent.mkdir(parents=True, exist_ok=True)
    Image.fromarray(buffer.to_array()).save(path)
    return str(path)
