"""create-cordova-plugin scaffolder -- generates Cordova plugin structures.

Takes the collected ``AnswerSet`` and renders a plugin directory with its
manifest, ``plugin.xml``, frontend API and per-platform native stubs.

Quick usage::

    from create_cordova_plugin.models import AnswerSet
    from create_cordova_plugin.scaffolder import PluginGenerator

    answers = AnswerSet(id="cordova-plugin-sample", api_name="SamplePlugin", platforms=["ios"])
    result = await PluginGenerator(answers).generate()
"""

from .generator import GenerationResult, PluginGenerator
from .locations import LocationPlan, materialize_locations, plan_locations
from .templates import TemplateId, TemplateRenderer

__all__ = [
    "GenerationResult",
    "LocationPlan",
    "PluginGenerator",
    "TemplateId",
    "TemplateRenderer",
    "materialize_locations",
    "plan_locations",
]
