import pytest

from codec_string_explain.diagnostics import normal

from codec_string_explain.exceptions import RegistryFrozenError

from codec_string_explain.registry import (
    DecoderEntry,
    RegistryBuilder,
    DecoderRegistry,
)


def decode_a(component):
    return [normal("a")]


def decode_b(component):
    return [normal("b")]


def render(label, diagnostics):
    return label


class TestRegistryBuilder(object):
    def test_single_identifier(self):
        builder = RegistryBuilder()
        builder.register("abc1", "ABC", decode_a)
        registry = builder.build()
        assert registry.lookup("abc1") == DecoderEntry("abc1", "ABC", decode_a, None)

    def test_many_identifiers(self):
        builder = RegistryBuilder()
        builder.register(["abc1", "abc2"], "ABC", decode_a, render)
        registry = builder.build()
        assert registry.lookup("abc1").decode is decode_a
        assert registry.lookup("abc2").decode is decode_a
        assert registry.lookup("abc2").render is render
        assert len(registry) == 2

    def test_identifiers_lower_cased(self):
        builder = RegistryBuilder()
        builder.register("vvcN", "VVC non-VCL", decode_a)
        registry = builder.build()
        assert registry.identifiers() == ["vvcn"]
        assert registry.lookup("VVCN").label == "VVC non-VCL"
        assert registry.lookup("vvcn").label == "VVC non-VCL"

    def test_first_registration_wins(self):
        builder = RegistryBuilder()
        builder.register("abc1", "First", decode_a)
        builder.register(["abc1", "abc2"], "Second", decode_b)
        builder.register("ABC1", "Third", decode_b)
        registry = builder.build()
        assert registry.lookup("abc1").label == "First"
        assert registry.lookup("abc1").decode is decode_a
        assert registry.lookup("abc2").label == "Second"

    def test_frozen_after_build(self):
        builder = RegistryBuilder()
        builder.register("abc1", "ABC", decode_a)
        registry = builder.build()
        with pytest.raises(RegistryFrozenError):
            builder.register("abc2", "ABC", decode_a)
        assert "abc2" not in registry


class TestDecoderRegistry(object):
    @pytest.fixture
    def registry(self):
        builder = RegistryBuilder()
        builder.register(["zzz1", "aaa1"], "Z and A", decode_a)
        builder.register("mmm1", "M", decode_b)
        return builder.build()

    def test_lookup_missing(self, registry):
        assert registry.lookup("nope") is None
        assert registry.lookup("") is None

    def test_contains(self, registry):
        assert "zzz1" in registry
        assert "ZZZ1" in registry
        assert "nope" not in registry

    def test_identifiers_sorted(self, registry):
        assert registry.identifiers() == ["aaa1", "mmm1", "zzz1"]

    def test_iter_in_registration_order(self, registry):
        assert [entry.identifier for entry in registry] == ["zzz1", "aaa1", "mmm1"]

    def test_len(self, registry):
        assert len(registry) == 3

    def test_empty(self):
        registry = RegistryBuilder().build()
        assert isinstance(registry, DecoderRegistry)
        assert len(registry) == 0
        assert list(registry) == []
