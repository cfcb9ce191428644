"""
:py:mod:`codec_string_explain.decoders`: Codec decoders
=======================================================

One module per codec family. Each module provides a ``decode_xxx(component)``
function, which returns a list of
:py:class:`~codec_string_explain.diagnostics.Diagnostic`, and a
``register_xxx(builder)`` function which registers the decoder with a
:py:class:`~codec_string_explain.registry.RegistryBuilder` under every codec
identifier it handles.

:py:func:`build_default_registry` registers every decoder in this package.
Hosts wishing to use a different set of decoders may instead call the
``register_xxx`` functions they need on their own builder.
"""

from codec_string_explain.registry import RegistryBuilder

from codec_string_explain.decoders._common import describe_only

from codec_string_explain.decoders.avc import register_avc
from codec_string_explain.decoders.hevc import register_hevc
from codec_string_explain.decoders.vvc import register_vvc
from codec_string_explain.decoders.evc import register_evc
from codec_string_explain.decoders.lcevc import register_lcevc
from codec_string_explain.decoders.mpegh import register_mpegh
from codec_string_explain.decoders.dolby_vision import register_dolby_vision
from codec_string_explain.decoders.aom import register_aom
from codec_string_explain.decoders.vp9 import register_vp9
from codec_string_explain.decoders.mpeg import register_mpeg
from codec_string_explain.decoders.ac4 import register_ac4
from codec_string_explain.decoders.dts import register_dts
from codec_string_explain.decoders.avs import register_avs
from codec_string_explain.decoders.text import register_text
from codec_string_explain.decoders.uwa import register_uwa

__all__ = [
    "REGISTER_FUNCTIONS",
    "describe_only",
    "build_default_registry",
]


REGISTER_FUNCTIONS = [
    register_avc,
    register_hevc,
    register_vvc,
    register_evc,
    register_lcevc,
    register_mpegh,
    register_dolby_vision,
    register_aom,
    register_vp9,
    register_mpeg,
    register_ac4,
    register_dts,
    register_avs,
    register_text,
    register_uwa,
]
"""The ``register_xxx`` function of every decoder, in registration order."""


def build_default_registry():
    """
    Build a :py:class:`~codec_string_explain.registry.DecoderRegistry`
    containing every decoder in this package.
    """
    builder = RegistryBuilder()
    for register in REGISTER_FUNCTIONS:
        register(builder)
    return builder.build()
