# Path: remapper/process/publicizer/publicizer.py
"""
Publicizer

Post-match accessibility widening. Flips visibility and sealing flags on
the in-memory declarations so that a rewritten module exposes them.

The transforms mutate declarations, so they only run once matching has
finished for every specification; a rename decision must never depend
on an already-widened module.
"""

from dataclasses import dataclass

from core.logger.ipo_logging import get_process_logger

from constants import ProcessingStatus
from process.matcher.models.type_declaration import TypeIndex, Visibility
from process.matcher.models.remap_results import RemapResults


@dataclass
class PublicizeSummary:
    """
    Counts of declarations changed by the transforms.

    Attributes:
        types_publicized: Not-public types made public
        methods_publicized: Methods made public
        accessors_publicized: Property accessors made public
        types_unsealed: Sealed types unsealed
    """
    types_publicized: int = 0
    methods_publicized: int = 0
    accessors_publicized: int = 0
    types_unsealed: int = 0

    @property
    def total_changes(self) -> int:
        return (
            self.types_publicized
            + self.methods_publicized
            + self.accessors_publicized
            + self.types_unsealed
        )

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            'types_publicized': self.types_publicized,
            'methods_publicized': self.methods_publicized,
            'accessors_publicized': self.accessors_publicized,
            'types_unsealed': self.types_unsealed,
        }


class Publicizer:
    """
    Widens accessibility of top-level module types.

    Both transforms are switched on separately; a disabled transform is
    a no-op.

    Example:
        publicizer = Publicizer(publicize=True, unseal=True)
        summary = publicizer.apply(type_index, results)
    """

    def __init__(self, publicize: bool = False, unseal: bool = False):
        """
        Initialize publicizer.

        Args:
            publicize: Make types, methods and accessors public
            unseal: Clear the sealed flag on types
        """
        self.logger = get_process_logger('publicizer')
        self.publicize_enabled = publicize
        self.unseal_enabled = unseal

    def apply(self, type_index: TypeIndex, results: RemapResults) -> PublicizeSummary:
        """
        Run the enabled transforms after matching has completed.

        Args:
            type_index: Declarations to transform
            results: Results of the finished matching run

        Returns:
            PublicizeSummary with change counts

        Raises:
            RuntimeError: If matching has not completed
        """
        if results.status != ProcessingStatus.COMPLETED:
            raise RuntimeError(
                f"Cannot widen accessibility while matching is "
                f"{results.status.value}"
            )

        summary = PublicizeSummary()

        if self.publicize_enabled:
            self.publicize(type_index, summary)

        if self.unseal_enabled:
            self.unseal(type_index, summary)

        return summary

    def publicize(self, type_index: TypeIndex, summary: PublicizeSummary) -> None:
        """Make not-public types, their methods and property accessors public."""
        self.logger.info("Starting publicization...")

        for type_decl in type_index.get_top_level_types():
            if type_decl.is_not_public:
                type_decl.visibility = Visibility.PUBLIC
                summary.types_publicized += 1

            for method in type_decl.methods:
                if not method.is_public:
                    method.is_public = True
                    summary.methods_publicized += 1

            for prop in type_decl.properties:
                for accessor in (prop.getter, prop.setter):
                    if accessor is not None and not accessor.is_public:
                        accessor.is_public = True
                        summary.accessors_publicized += 1

        self.logger.info(
            f"Publicized {summary.types_publicized} types, "
            f"{summary.methods_publicized} methods, "
            f"{summary.accessors_publicized} accessors"
        )

    def unseal(self, type_index: TypeIndex, summary: PublicizeSummary) -> None:
        """Clear the sealed flag on every sealed type."""
        self.logger.info("Starting unseal...")

        for type_decl in type_index.get_top_level_types():
            if type_decl.is_sealed:
                type_decl.is_sealed = False
                summary.types_unsealed += 1

        self.logger.info(f"Unsealed {summary.types_unsealed} types")


__all__ = ['Publicizer', 'PublicizeSummary']
