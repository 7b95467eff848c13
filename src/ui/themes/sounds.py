"""Sound effects and background music for Eco Poker.

Audio data (base64-encoded MP3) is sent to the browser ONCE per track and
cached as JavaScript Audio objects in ``window.parent._eco_audio``.  Later
Streamlit reruns send only small control commands instead of the full
base64 payloads.

Whether anything plays is decided by the :class:`Preferences` object passed
in by the caller; this module keeps no on/off flags of its own.  Sound
effects without an audio file are synthesized in the browser from small
tone tables (Web Audio oscillators), and background music streams from a
hosted track, so the game has sound without an assets folder.
"""

from __future__ import annotations

import base64
from dataclasses import dataclass
from pathlib import Path

import streamlit as st
import streamlit.components.v1 as components

from src.database.models import Preferences
from src.engine.base import Combo

# ---------------------------------------------------------------------------
# Asset paths and mappings
# ---------------------------------------------------------------------------

_SOUNDS_DIR = Path(__file__).resolve().parents[3] / "assets" / "sounds"

_SFX_FILES: dict[str, str] = {
    "roll": "roll.mp3",
    "hold": "hold.mp3",
    "success": "success.mp3",
    "click": "click.mp3",
    "combo": "combo.mp3",
    "combo_clean_power": "combo_clean_power.mp3",
    "combo_clean_flush": "combo_clean_flush.mp3",
    "combo_blackout": "combo_blackout.mp3",
}

_COMBO_SFX: dict[Combo, str] = {
    Combo.CLEAN_POWER: "combo_clean_power",
    Combo.CLEAN_FLUSH_TOTAL: "combo_clean_flush",
    Combo.BLACKOUT: "combo_blackout",
}

_MUSIC_FILE = "background.mp3"
_MUSIC_KEY = "background"
_MUSIC_URL = (
    "https://cdn.pixabay.com/download/audio/2022/02/22/"
    "audio_d171694f41.mp3?filename=lofi-study-112191.mp3"
)


@dataclass(frozen=True)
class Tone:
    """One oscillator note: pitch in Hz, waveform, seconds and peak gain."""

    frequency: float
    waveform: str
    duration: float
    volume: float
    delay: float = 0.0


_ARPEGGIO = tuple(
    Tone(freq, "triangle", 0.6, 0.08, i * 0.08)
    for i, freq in enumerate((329.63, 392.0, 523.25, 659.25))
)

_SFX_TONES: dict[str, tuple[Tone, ...]] = {
    "roll": tuple(
        Tone(freq, "square", 0.1, 0.02, i * 0.05)
        for i, freq in enumerate((170.0, 215.0, 160.0, 240.0, 195.0))
    ),
    "hold": (Tone(660.0, "sine", 0.15, 0.05),),
    "success": (
        Tone(523.25, "sine", 0.3, 0.1),
        Tone(659.25, "sine", 0.4, 0.08, 0.1),
    ),
    "click": (Tone(1200.0, "sine", 0.05, 0.03),),
    "combo": _ARPEGGIO,
    "combo_clean_power": _ARPEGGIO,
    "combo_clean_flush": _ARPEGGIO,
    "combo_blackout": (Tone(60.0, "sawtooth", 0.8, 0.15),),
}

# Attack, lowpass at twice the pitch, then exponential decay
_TONE_JS = """\
    function tone(freq, type, dur, vol, delay) {
      var Ctx = p.AudioContext || p.webkitAudioContext;
      if (!Ctx) return;
      if (!eco.ctx) eco.ctx = new Ctx();
      var ctx = eco.ctx;
      if (ctx.state === "suspended") ctx.resume();
      var t = ctx.currentTime + delay;
      var osc = ctx.createOscillator();
      var gain = ctx.createGain();
      var filter = ctx.createBiquadFilter();
      osc.type = type;
      osc.frequency.setValueAtTime(freq, t);
      gain.gain.setValueAtTime(0, t);
      gain.gain.linearRampToValueAtTime(vol, t + 0.05);
      gain.gain.exponentialRampToValueAtTime(0.0001, t + dur);
      filter.type = "lowpass";
      filter.frequency.setValueAtTime(freq * 2, t);
      osc.connect(filter);
      filter.connect(gain);
      gain.connect(ctx.destination);
      osc.start(t);
      osc.stop(t + dur);
    }
"""

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


@st.cache_data(show_spinner=False)
def _load_audio_b64(filename: str) -> str | None:
    """Read an audio file and return its base64-encoded string.

    Returns ``None`` if the file doesn't exist.
    """
    path = _SOUNDS_DIR / filename
    if not path.exists():
        return None
    return base64.b64encode(path.read_bytes()).decode("ascii")


# ---------------------------------------------------------------------------
# Public API - SFX
# ---------------------------------------------------------------------------


def play_sfx(name: str, preferences: Preferences) -> None:
    """Queue a sound effect to be played on the next render cycle.

    Call this from action handlers (roll, hold, confirm, etc.).
    The actual playback happens in :func:`render_audio_system`.
    """
    if not preferences.sound_enabled:
        return
    if name not in _SFX_FILES:
        return
    st.session_state["_sfx_pending"] = name


def play_combo_sfx(combo: Combo, preferences: Preferences) -> None:
    """Queue the sound for a named combination, if combo sounds are on."""
    if not preferences.combo_sound_enabled:
        return
    play_sfx(_COMBO_SFX.get(combo, "combo"), preferences)


# ---------------------------------------------------------------------------
# Public API - audio system renderer
# ---------------------------------------------------------------------------


def _tone_calls(name: str, gain: float) -> list[str]:
    """JS calls that synthesize a sound effect with the Web Audio API."""
    return [
        f"tone({t.frequency}, '{t.waveform}', {t.duration}, "
        f"{round(t.volume * gain, 4)}, {t.delay});"
        for t in _SFX_TONES[name]
    ]


def build_audio_script(
    preferences: Preferences,
    sfx_pending: str | None,
    loaded: set[str],
) -> str:
    """Build the JavaScript for one render of the audio system.

    Args:
        preferences: Current audio preferences
        sfx_pending: Sound effect queued by an action handler, if any
        loaded: Track keys already sent to the browser; updated in place

    Returns:
        A ``<script>`` block. A sound effect with no audio file is
        synthesized from its tone table; music without a file streams
        from ``_MUSIC_URL``.
    """
    music_enabled = preferences.sound_enabled and preferences.music_enabled
    volume = preferences.music_volume / 100.0
    sfx_volume = preferences.sound_volume / 100.0
    # Tone volumes are tuned for the default 50% slider position
    tone_gain = preferences.sound_volume / 50.0

    if not preferences.sound_enabled or sfx_pending not in _SFX_FILES:
        sfx_pending = None

    # --- One-time data preloads -----------------------------------------
    preload_parts: list[str] = []

    if music_enabled and _MUSIC_KEY not in loaded:
        b64 = _load_audio_b64(_MUSIC_FILE)
        src = f"data:audio/mpeg;base64,{b64}" if b64 else _MUSIC_URL
        preload_parts.append(
            f"eco.music = new p.Audio('{src}');\n"
            f"eco.music.loop = true;"
        )
        loaded.add(_MUSIC_KEY)

    sfx_cache_key = f"sfx_{sfx_pending}" if sfx_pending else None
    if sfx_pending and sfx_cache_key not in loaded:
        b64 = _load_audio_b64(_SFX_FILES[sfx_pending])
        if b64:
            preload_parts.append(
                f"eco.sfx['{sfx_pending}'] = 'data:audio/mpeg;base64,{b64}';"
            )
            loaded.add(sfx_cache_key)

    # --- Lightweight control JS -----------------------------------------
    control_parts: list[str] = []

    if music_enabled:
        control_parts.append(
            f"if (eco.music) {{\n"
            f"  eco.music.volume = {volume};\n"
            f"  if (eco.music.paused) eco.music.play().catch(function(){{}});\n"
            f"}}"
        )
    else:
        control_parts.append("if (eco.music) eco.music.pause();")

    if sfx_pending:
        fallback = "\n  ".join(_tone_calls(sfx_pending, tone_gain))
        control_parts.append(
            f"if (eco.sfx['{sfx_pending}']) {{\n"
            f"  var s = new p.Audio(eco.sfx['{sfx_pending}']);\n"
            f"  s.volume = {sfx_volume};\n"
            f"  s.play().catch(function(){{}});\n"
            f"}} else {{\n"
            f"  {fallback}\n"
            f"}}"
        )

    return (
        "<script>\n"
        "(function() {\n"
        "  try {\n"
        "    var p = window.parent;\n"
        "    if (!p._eco_audio) p._eco_audio = { music: null, sfx: {}, ctx: null };\n"
        "    var eco = p._eco_audio;\n"
        + _TONE_JS
        + "\n".join(preload_parts) + "\n"
        + "\n".join(control_parts) + "\n"
        "  } catch(e) { console.warn('Eco audio:', e); }\n"
        "})();\n"
        "</script>"
    )


def render_audio_system(preferences: Preferences) -> None:
    """Render the complete audio system (background music + pending SFX).

    Uses a single ``components.html`` call with JavaScript that caches
    ``Audio`` objects in ``window.parent._eco_audio``.  Base64 audio data is
    included **only** the first time a track is needed.
    """
    sfx_pending = st.session_state.pop("_sfx_pending", None)
    loaded: set[str] = st.session_state.get("_audio_loaded", set())
    html = build_audio_script(preferences, sfx_pending, loaded)
    st.session_state["_audio_loaded"] = loaded
    components.html(html, height=0)
