"""create-cordova-plugin: interactive scaffolding for Cordova plugins."""

__version__ = "1.0.0"
