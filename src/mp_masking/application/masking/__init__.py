"""Application Data Masking."""
from mp_masking.application.masking.defaults import (
    clear_cache,
    default_masker,
    mask,
    mask_float,
    mask_signed_int,
    mask_text,
    mask_unsigned_int,
    register_field_rule,
    register_handler,
    reset_default_masker,
    set_cache_enabled,
    set_mask_char,
    set_tag_name,
)
from mp_masking.application.masking.masker import Masker
from mp_masking.application.masking.metadata import (
    DataclassProvider,
    FieldDescriptor,
    NamedTupleProvider,
    TypeDescriptorProvider,
    TypeMetadata,
    TypeMetadataCache,
)
from mp_masking.application.masking.registry import FieldRuleRegistry, HandlerRegistry
from mp_masking.application.masking.rules import (
    MASK_FILLED,
    MASK_FIXED,
    MASK_HASH,
    MASK_RANDOM,
    MASK_ZERO,
    MaskHandler,
    TargetKind,
)

__all__ = [
    "DataclassProvider",
    "FieldDescriptor",
    "FieldRuleRegistry",
    "HandlerRegistry",
    "MASK_FILLED",
    "MASK_FIXED",
    "MASK_HASH",
    "MASK_RANDOM",
    "MASK_ZERO",
    "MaskHandler",
    "Masker",
    "NamedTupleProvider",
    "TargetKind",
    "TypeDescriptorProvider",
    "TypeMetadata",
    "TypeMetadataCache",
    "clear_cache",
    "default_masker",
    "mask",
    "mask_float",
    "mask_signed_int",
    "mask_text",
    "mask_unsigned_int",
    "register_field_rule",
    "register_handler",
    "reset_default_masker",
    "set_cache_enabled",
    "set_mask_char",
    "set_tag_name",
]
