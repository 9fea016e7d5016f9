"""Application – masking engine and its registries."""

from mp_masking.application.masking import (
    Masker,
    TargetKind,
    TypeDescriptorProvider,
    default_masker,
)

__all__ = ["Masker", "TargetKind", "TypeDescriptorProvider", "default_masker"]
