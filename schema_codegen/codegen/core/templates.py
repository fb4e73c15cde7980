"""
Jinja2 bridge for the template-rendering layer.

The backend's resolvers are installed as filters and its processed option
bundle as the ``options`` global, so templates interpolate resolved
identifiers and types without calling back into Python.
"""

from pathlib import Path
from typing import Any, Dict, Optional, Union

from jinja2 import (
    BaseLoader,
    ChoiceLoader,
    DictLoader,
    Environment,
    FileSystemLoader,
    StrictUndefined,
    Template,
)

from .generator import CodeGenerator, ResolvedSchema
from .schema import Property


class TemplateError(Exception):
    """Raised when a template cannot be found or rendered."""

    pass


class TemplateEngine:
    """Jinja2 environment bound to one generator backend."""

    def __init__(
        self,
        generator: CodeGenerator,
        template_dir: Optional[Union[str, Path]] = None,
    ):
        """
        Args:
            generator: Backend whose resolvers become template filters
            template_dir: Optional directory of template files; in-memory
                templates added later take precedence over it
        """
        self.generator = generator
        self.template_dir = Path(template_dir) if template_dir else None
        self._memory = DictLoader({})
        self._env = Environment(
            loader=self._build_loader(),
            autoescape=False,
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
            undefined=StrictUndefined,
        )
        self._install_filters()

        options = getattr(generator, "additional_properties", None)
        self._env.globals["options"] = options() if options is not None else {}

    def _build_loader(self) -> BaseLoader:
        if self.template_dir is not None and self.template_dir.is_dir():
            return ChoiceLoader([self._memory, FileSystemLoader(str(self.template_dir))])
        return self._memory

    def _install_filters(self):
        generator = self.generator
        self._env.filters.update(
            var_name=generator.to_var_name,
            param_name=generator.to_param_name,
            model_name=generator.to_model_name,
            model_filename=generator.to_model_filename,
            api_name=generator.to_api_name,
            enum_name=generator.to_enum_name,
            enum_var_name=self._enum_var_name,
            type_declaration=self._type_declaration,
            model_import=generator.to_model_import,
            comment=_line_comment,
        )

        escape_unsafe = getattr(generator, "escape_unsafe_characters", None)
        if escape_unsafe is not None:
            self._env.filters["escape_unsafe"] = escape_unsafe

    def _enum_var_name(self, value: Any, datatype: str = "String") -> str:
        return self.generator.to_enum_var_name(str(value), datatype)

    def _type_declaration(self, value: Union[Property, Dict[str, Any]]) -> str:
        # swagger-style dicts are accepted for hand-written template contexts
        if not isinstance(value, Property):
            value = Property.from_dict(value)
        return self.generator.get_type_declaration(value)

    def _render(self, template: Template, context: Dict[str, Any], label: str) -> str:
        try:
            return template.render(**context)
        except Exception as e:
            raise TemplateError(f"Failed to render {label}: {e}") from e

    def render_template(self, template_name: str, context: Dict[str, Any]) -> str:
        """
        Render a named template (in-memory first, then the template directory).

        Raises:
            TemplateError: If the template is missing or rendering fails
        """
        try:
            template = self._env.get_template(template_name)
        except Exception as e:
            raise TemplateError(f"Failed to load template {template_name}: {e}") from e
        return self._render(template, context, f"template {template_name}")

    def render_string(self, source: str, context: Dict[str, Any]) -> str:
        try:
            template = self._env.from_string(source)
        except Exception as e:
            raise TemplateError(f"Failed to compile template string: {e}") from e
        return self._render(template, context, "template string")

    def render_schema(self, template_name: str, schema: ResolvedSchema) -> str:
        """Render one resolved model; the template sees it as ``model``."""
        return self.render_template(template_name, {"model": schema})

    def add_template(self, name: str, source: str):
        self._memory.mapping[name] = source

    def template_exists(self, template_name: str) -> bool:
        return template_name in self._env.list_templates()


def _line_comment(value: Any, marker: str = "//") -> str:
    """Prefix every non-blank line with a line-comment marker."""
    return "\n".join(
        f"{marker} {line}" if line.strip() else line for line in str(value).split("\n")
    )


def create_template_engine(
    generator: CodeGenerator, template_dir: Optional[Union[str, Path]] = None
) -> TemplateEngine:
    return TemplateEngine(generator, template_dir)
