from querypad.i18n.catalog import I18nService

__all__ = ["I18nService"]
