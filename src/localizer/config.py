"""Configuration for the resource generator."""

from dataclasses import dataclass, field
from pathlib import Path


# Header written at the top of every generated file
AUTOGEN_HEADER = "/* This file is autogenerated. Do not edit manually.  */"

# Image-style asset suffixes exposed as drawables
DRAWABLE_SUFFIXES = (".jpeg", ".png", ".xml")


@dataclass
class GeneratorConfig:
    """Configuration for the Kotlin resource generator.

    Attributes:
        package: Kotlin package of the generated R modules.
        android_r: Fully qualified Android R class native lookups delegate to.
        shared_flavour: Source set holding the shared contract.
        native_flavours: Source sets with a native resource lookup.
        fallback_flavours: Source sets that bake literal values into source.
        source_dir: Language directory inside each source set.
        r_file_name: File name of the generated R module.
        plural_rules_file_name: File name of the generated plural rules.
    """
    package: str = "au.id.micolous.metrodroid.multi"
    android_r: str = "au.id.micolous.farebot.R"
    shared_flavour: str = "commonMain"
    native_flavours: list[str] = field(default_factory=lambda: ["androidMain"])
    fallback_flavours: list[str] = field(
        default_factory=lambda: ["chromeosMain", "iOSMain", "jvmCliMain"]
    )
    source_dir: str = "kotlin"
    r_file_name: str = "R.kt"
    plural_rules_file_name: str = "PluralRules.kt"

    @property
    def package_path(self) -> Path:
        """Package as a relative directory path."""
        return Path(*self.package.split("."))

    def module_dir(self, output_dir: Path, flavour: str) -> Path:
        """Directory that holds the generated modules of a flavour."""
        return Path(output_dir) / flavour / self.source_dir / self.package_path

    def r_file(self, output_dir: Path, flavour: str) -> Path:
        """Path of the R module for a flavour."""
        return self.module_dir(output_dir, flavour) / self.r_file_name
