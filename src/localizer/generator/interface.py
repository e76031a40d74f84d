"""Generation of the shared resource contract and its platform bindings."""

import logging
from collections import Counter
from pathlib import Path
from typing import Optional

from ..config import AUTOGEN_HEADER, GeneratorConfig
from ..errors import ConfigurationError, ConsistencyError
from ..plurals import transform_expr
from ..resources.models import ResourceKind, ResourceTable
from ..strings.escape import StringLiteralEscaper
from .flavours import Binding, Flavour, RModule
from .templates import PLURAL_RULES_TEMPLATE, R_TEMPLATE, make_environment

logger = logging.getLogger(__name__)


def check_consistency(contract: RModule, module: RModule) -> None:
    """Verify a binding module declares exactly the contract's identifiers.

    Raises:
        ConsistencyError: On the first resource kind that differs.
    """
    for kind in ResourceKind:
        expected = Counter(contract.identifiers(kind))
        actual = Counter(module.identifiers(kind))
        if expected != actual:
            raise ConsistencyError(
                module.flavour.name,
                kind.value,
                missing=(expected - actual).keys(),
                extra=(actual - expected).keys()
            )


class ResourceInterfaceGenerator:
    """Writes one ``R.kt`` per flavour.

    The shared flavour gets ``expect`` objects ``Rstring``, ``Rplurals`` and
    ``Rdrawable`` plus the ``Rinterface`` accessor exposed as the global
    ``R``. Every binding flavour gets the matching ``actual`` objects. All
    modules are built and checked against the contract before any file is
    written.
    """

    def __init__(
        self,
        config: Optional[GeneratorConfig] = None,
        escaper: Optional[StringLiteralEscaper] = None
    ):
        self.config = config or GeneratorConfig()
        self.escaper = escaper or StringLiteralEscaper()
        self.env = make_environment(self.escaper.escape)

    def build_module(
        self,
        flavour: Flavour,
        table: ResourceTable,
        drawables: list[str]
    ) -> RModule:
        """Render the declarations of one flavour.

        Identifiers for which the flavour's renderer returns None are left
        out, which the consistency check then reports.
        """
        module = RModule(flavour)
        for kind in ResourceKind:
            names = drawables if kind == ResourceKind.DRAWABLE else table.identifiers(kind)
            bindings = []
            for name in names:
                source = flavour.render(name, kind)
                if source is None:
                    continue
                bindings.append(Binding(name, kind, source))
            module.groups[kind] = bindings
        return module

    def render_module(self, module: RModule) -> str:
        template = self.env.from_string(R_TEMPLATE)
        return template.render(
            header=AUTOGEN_HEADER,
            package=self.config.package,
            keyword=module.flavour.role.keyword,
            groups=list(module.groups.items()),
            shared=module.flavour.is_shared,
        )

    def render_plural_rules(self, rules: dict[str, dict[str, str]]) -> str:
        """Render CLDR rules as simplified ``(category, condition)`` pairs."""
        locales = [
            (locale, [
                (category, transform_expr(condition))
                for category, condition in categories.items()
            ])
            for locale, categories in rules.items()
        ]
        template = self.env.from_string(PLURAL_RULES_TEMPLATE)
        return template.render(
            header=AUTOGEN_HEADER,
            package=self.config.package,
            locales=locales,
        )

    def generate(
        self,
        output_dir: Path,
        table: ResourceTable,
        drawables: list[str],
        flavours: list[Flavour],
        plural_rules: Optional[dict[str, dict[str, str]]] = None
    ) -> list[Path]:
        """Generate and write the modules of all flavours.

        Args:
            output_dir: Root containing one directory per flavour.
            table: Parsed strings and plurals.
            drawables: Drawable identifiers.
            flavours: Exactly one shared flavour plus any number of bindings.
            plural_rules: Optional CLDR rules written next to the contract.

        Returns:
            Paths of the written files.
        """
        shared = self._shared_flavour(flavours)
        self._warn_duplicates(drawables)

        modules = [self.build_module(flavour, table, drawables) for flavour in flavours]
        contract = next(m for m in modules if m.flavour is shared)
        for module in modules:
            if module is not contract:
                check_consistency(contract, module)

        outputs = {
            self.config.r_file(output_dir, module.flavour.name): self.render_module(module)
            for module in modules
        }
        if plural_rules is not None:
            rules_path = (
                self.config.module_dir(output_dir, shared.name)
                / self.config.plural_rules_file_name
            )
            outputs[rules_path] = self.render_plural_rules(plural_rules)

        for path, content in outputs.items():
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content, encoding="utf-8")
            logger.info("Wrote %s", path)

        return list(outputs)

    @staticmethod
    def _shared_flavour(flavours: list[Flavour]) -> Flavour:
        names = [flavour.name for flavour in flavours]
        duplicated = sorted({name for name in names if names.count(name) > 1})
        if duplicated:
            raise ConfigurationError(f"Duplicate flavours: {', '.join(duplicated)}")

        shared = [flavour for flavour in flavours if flavour.is_shared]
        if len(shared) != 1:
            raise ConfigurationError(
                f"Expected exactly one shared flavour, got {len(shared)}"
            )
        return shared[0]

    @staticmethod
    def _warn_duplicates(drawables: list[str]) -> None:
        duplicated = sorted(name for name, count in Counter(drawables).items() if count > 1)
        if duplicated:
            logger.warning(
                "Drawables found in more than one directory: %s",
                ", ".join(duplicated)
            )
