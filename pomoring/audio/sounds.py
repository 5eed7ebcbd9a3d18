"""Completion beep: synthesised with numpy, played with QSoundEffect.

The WAV is generated once and cached to disk so later launches only
load it.  Playback never raises; anything that goes wrong is logged and
the timer carries on.
"""

from __future__ import annotations

import io
import logging
import wave
from pathlib import Path

import numpy as np

from PyQt6.QtCore import QObject, QUrl
from PyQt6.QtMultimedia import QSoundEffect

from ..database.db import APP_SUPPORT_DIR


logger = logging.getLogger(__name__)

SOUNDS_DIR = APP_SUPPORT_DIR / "sounds"

SOUND_NAMES = ("beep",)

SAMPLE_RATE = 44100


# ═══════════════════════════════════════════════════════════════════════════
#  WAV SYNTHESIS
# ═══════════════════════════════════════════════════════════════════════════


def _sine(freq: float, duration_s: float) -> np.ndarray:
    t = np.linspace(0, duration_s, int(SAMPLE_RATE * duration_s), endpoint=False)
    return np.sin(2 * np.pi * freq * t)


def _fade(samples: np.ndarray, attack: int = 220, release: int = 1800) -> np.ndarray:
    """Linear fade in/out (in samples) so the tone starts without a click."""
    env = np.ones(len(samples), dtype=np.float64)
    a = min(attack, len(samples))
    r = min(release, len(samples) - a)
    if a > 0:
        env[:a] = np.linspace(0.0, 1.0, a)
    if r > 0:
        env[-r:] = np.linspace(1.0, 0.0, r)
    return samples * env


def _to_wav_bytes(samples: np.ndarray) -> bytes:
    """Float samples in -1..1 as mono 16-bit PCM WAV."""
    pcm = (np.clip(samples, -1.0, 1.0) * 32767).astype(np.int16)
    buf = io.BytesIO()
    with wave.open(buf, "wb") as wf:
        wf.setnchannels(1)
        wf.setsampwidth(2)
        wf.setframerate(SAMPLE_RATE)
        wf.writeframes(pcm.tobytes())
    return buf.getvalue()


def _generate_beep() -> bytes:
    """Two short A5 pips, 120 ms apart."""
    pip = _fade(_sine(880.0, 0.18) * 0.5)
    gap = np.zeros(int(SAMPLE_RATE * 0.12))
    tail = np.zeros(int(SAMPLE_RATE * 0.05))
    return _to_wav_bytes(np.concatenate([pip, gap, pip, tail]))


_GENERATORS = {
    "beep": _generate_beep,
}


# ═══════════════════════════════════════════════════════════════════════════
#  SOUND MANAGER
# ═══════════════════════════════════════════════════════════════════════════


class SoundManager(QObject):
    """Caches and plays the app's sounds.

    Usage::

        mgr = SoundManager(parent=self)
        mgr.play("beep")
    """

    def __init__(
        self,
        parent: QObject | None = None,
        *,
        sounds_dir: Path | None = None,
    ) -> None:
        super().__init__(parent)
        self._sounds_dir = sounds_dir or SOUNDS_DIR
        self._effects: dict[str, QSoundEffect] = {}

        self._ensure_wav_files()
        self._load_effects()

    def play(self, name: str = "beep") -> bool:
        """Play a sound by name.  Returns False (and logs) on failure."""
        effect = self._effects.get(name)
        if effect is None:
            logger.warning("Sound %r is not available", name)
            return False
        if effect.status() == QSoundEffect.Status.Error:
            logger.warning("Sound %r failed to load from %s", name, effect.source().toLocalFile())
            return False
        effect.play()
        return True

    @property
    def available(self) -> tuple[str, ...]:
        return tuple(self._effects)

    # ── internal ──────────────────────────────────────────────────────

    def _ensure_wav_files(self) -> None:
        try:
            self._sounds_dir.mkdir(parents=True, exist_ok=True)
            for name, gen_fn in _GENERATORS.items():
                path = self._sounds_dir / f"{name}.wav"
                if not path.exists():
                    path.write_bytes(gen_fn())
        except OSError:
            logger.exception("Could not write sound cache to %s", self._sounds_dir)

    def _load_effects(self) -> None:
        for name in SOUND_NAMES:
            path = self._sounds_dir / f"{name}.wav"
            if path.exists():
                effect = QSoundEffect(self)
                effect.setSource(QUrl.fromLocalFile(str(path)))
                self._effects[name] = effect
