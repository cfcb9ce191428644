"""
Helpers shared by the decoders in :py:mod:`codec_string_explain.decoders`.
"""

from codec_string_explain.classification import classify

from codec_string_explain.diagnostics import informative, cross_reference_term

from codec_string_explain.tables import CLASSIFICATION_SCHEMES

__all__ = [
    "classification_terms",
    "describe_only",
]


def classification_terms(coding_params, schemes=CLASSIFICATION_SCHEMES):
    """
    Classify a decoder's coding parameters, returning a list containing a
    :py:func:`~codec_string_explain.diagnostics.cross_reference_term`
    diagnostic if a term matched, or an empty list otherwise.
    """
    term = classify(coding_params, schemes)
    if term:
        return [cross_reference_term(term)]
    else:
        return []


def describe_only(label):
    """
    Create a decode function for a codec which is recognised but whose
    parameters are not interpreted. The function reports only the codec's
    label.
    """

    def decode(component):
        return [informative("{}: parameters are not interpreted".format(label))]

    decode.__name__ = "decode_{}".format(label.lower().replace(" ", "_"))
    return decode
