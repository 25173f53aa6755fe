"""
Formats de rapport et options de mise en forme
"""

from enum import Enum

from ..core.errors import ConfigurationError


class ReportFormat(Enum):
    """Formats de sortie supportés"""

    TXT = 'TXT'
    CSV = 'CSV'
    HTML = 'HTML'
    XML = 'XML'
    JSON = 'JSON'

    @property
    def extension(self) -> str:
        return self.value.lower()

    @classmethod
    def parse(cls, value) -> 'ReportFormat':
        """
        Convertit une saisie utilisateur en format (insensible à la casse)

        Raises:
            ConfigurationError: Format inconnu
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().upper())
        except ValueError:
            choices = ', '.join(f.value for f in cls)
            raise ConfigurationError(f"Format de rapport inconnu {value!r} (choix: {choices})") from None


class FormattingOption(Enum):
    """Sous-formats : Table/List pour HTML, String/Stream pour XML"""

    TABLE = 'Table'
    LIST = 'List'
    STRING = 'String'
    STREAM = 'Stream'

    @classmethod
    def parse(cls, value) -> 'FormattingOption':
        """
        Convertit une saisie utilisateur en option (insensible à la casse)

        Raises:
            ConfigurationError: Option inconnue
        """
        if isinstance(value, cls):
            return value
        for option in cls:
            if option.value.lower() == str(value).strip().lower():
                return option
        choices = ', '.join(o.value for o in cls)
        raise ConfigurationError(f"Option de mise en forme inconnue {value!r} (choix: {choices})")


# Options admises pour les formats qui en exigent une
REQUIRED_OPTIONS = {
    ReportFormat.HTML: (FormattingOption.TABLE, FormattingOption.LIST),
    ReportFormat.XML: (FormattingOption.STRING, FormattingOption.STREAM),
}
