"""Page template object.

Bundles one template identifier with its data and a translator, the way
page handlers use it:

    page = Template(settings, "login:form.html")
    page.data["username"] = "alice"
    html = page.show()

Inside the resource, ``this`` refers to the Template, so
``{{ this.t("{login:user}") }}`` reaches the translator.
"""

import warnings
from collections.abc import Mapping
from typing import Any

from themeroute.config import ThemerouteSettings
from themeroute.core.types import Dictionary, RenderContext, ResolvedPath
from themeroute.rendering.renderer import TemplateRenderer
from themeroute.translation import CatalogTranslationEngine, Translator, merge_dictionaries


class Template:
    """A renderable page: template identifier, data and translator."""

    def __init__(
        self,
        settings: ThemerouteSettings,
        template: str,
        default_dictionary: Dictionary | None = None,
        renderer: TemplateRenderer | None = None,
        translator: Translator | None = None,
    ):
        """Initialize template.

        Args:
            settings: Configuration
            template: Template identifier, ``module:name`` or ``name``
            default_dictionary: Initial dictionary for the default
                translator (ignored when ``translator`` is given)
            renderer: Renderer to use (None = built from settings)
            translator: Translator to use (None = catalog-backed)
        """
        self.settings = settings
        self.template = template
        self.renderer = renderer or TemplateRenderer(settings)
        self.data: RenderContext = self.renderer.new_context()
        if translator is None:
            engine = CatalogTranslationEngine(
                language=settings.language_default,
                default_language=settings.language_default,
                dictionary=default_dictionary,
            )
            translator = Translator(engine)
        self._translator = translator

    @property
    def translator(self) -> Translator:
        return self._translator

    def t(
        self,
        tag: str,
        replacements: Mapping[str, Any] | None = None,
        fallback_default: bool = True,
        old_replacements: Mapping[str, Any] | None = None,
        strip_tags: bool = False,
    ) -> str:
        """Translate a tag. See Translator.t."""
        return self._translator.t(tag, replacements, fallback_default, old_replacements, strip_tags)

    def include_inline_translation(self, tag: str, translation: str | Mapping[str, str]) -> None:
        self._translator.include_inline_translation(tag, translation)

    def find_template_path(self) -> ResolvedPath:
        return self.renderer.find_template_path(self.template)

    def show(self) -> str:
        """Render the template with ``data`` plus ``this``."""
        context = dict(self.data)
        context["this"] = self
        return self.renderer.render(self.template, context=context)

    # Deprecated compatibility shims

    def get_translation(self, translations: Mapping[str, str]) -> str:
        """Deprecated: use ``translator.get_preferred_translation``."""
        warnings.warn(
            "Template.get_translation() is deprecated, use Translator.get_preferred_translation()",
            DeprecationWarning,
            stacklevel=2,
        )
        return self._translator.get_preferred_translation(translations)

    @staticmethod
    def lang_merge(definitions: Dictionary, translations: Dictionary) -> Dictionary:
        """Deprecated: use ``merge_dictionaries``."""
        warnings.warn(
            "Template.lang_merge() is deprecated, use merge_dictionaries()",
            DeprecationWarning,
            stacklevel=2,
        )
        return merge_dictionaries(definitions, translations)
