from __future__ import annotations

import os
import tempfile
from pathlib import Path

from PIL import Image

from custom_labels.errors import SaveError


def _current_umask() -> int:
	mask = os.umask(0)
	os.umask(mask)
	return mask


class PNGWriter:
	"""Write one PNG to a fixed path without ever leaving it half-written.

	The image is encoded to a temp file beside the target and moved over it
	with ``os.replace``; a failed save leaves any existing file untouched.
	"""

	def __init__(self, out_path: str | os.PathLike) -> None:
		self.out_path = Path(out_path)

	def write(self, image: Image.Image) -> Path:
		out_dir = self.out_path.parent
		try:
			out_dir.mkdir(parents=True, exist_ok=True)
			fd, tmp = tempfile.mkstemp(
				prefix=f".{self.out_path.name}.", suffix=".tmp", dir=out_dir
			)
		except OSError as e:
			raise SaveError(f"error saving image: {e}", cause=e) from e
		try:
			with os.fdopen(fd, "wb") as f:
				image.save(f, format="PNG")
			os.chmod(tmp, 0o666 & ~_current_umask())
			os.replace(tmp, self.out_path)
		except (OSError, ValueError) as e:
			try:
				os.unlink(tmp)
			except FileNotFoundError:
				pass
			raise SaveError(f"error saving image: {e}", cause=e) from e
		return self.out_path
