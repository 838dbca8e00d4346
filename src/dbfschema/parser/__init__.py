"""Table descriptor loading."""

from dbfschema.parser.loader import DescriptorError, DescriptorLoader, DescriptorSafetyError

__all__ = ["DescriptorError", "DescriptorLoader", "DescriptorSafetyError"]
