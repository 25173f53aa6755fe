"""
Point d'entrée principal de SoftAudit

Enchaîne la collecte des logiciels installés et l'écriture du rapport :
- En mode options (--format, --formatting, --output-dir)
- En mode interactif si aucun format n'est donné depuis un terminal
- Sans fichier (--no-file) : la liste est affichée sur la sortie standard
"""

import sys
import argparse
from typing import List, Optional

from softaudit.core.config import AuditConfig, create_default_config
from softaudit.core.logger import AuditLogger
from softaudit.core.errors import SoftAuditError, ConfigurationError
from softaudit.core.record import SoftwareRecord
from softaudit.core.reporter import ReportWriter
from softaudit.collectors.software import SoftwareCollector
from softaudit.reporters import ReportFormat, FormattingOption, REQUIRED_OPTIONS


class SoftAudit:
    """
    Application SoftAudit

    Cette classe assemble configuration, logger, collecteur et générateur
    de rapport. La liste des logiciels n'est conservée nulle part : elle
    est retournée par collect() et passée explicitement à export().
    """

    def __init__(self, config_path=None, verbose: bool = False, sources=None):
        """
        Args:
            config_path: Chemin vers le fichier de configuration
            verbose: Active les logs DEBUG
            sources: Sources d'inventaire (par défaut celles de la plateforme)
        """
        self.config = AuditConfig(config_path)
        self.logger = AuditLogger(self.config, verbose=verbose)

        self.collector = SoftwareCollector(self.config, self.logger, sources=sources)
        self.writer = ReportWriter(self.config, self.logger)

    def collect(self) -> List[SoftwareRecord]:
        """
        Collecte les logiciels installés

        Returns:
            list: Enregistrements dans l'ordre d'énumération
        """
        self.logger.info("=== Début de l'inventaire logiciel ===")
        records = self.collector.collect()
        self.logger.info("=== Fin de l'inventaire logiciel ===")
        return records

    def export(self, records: List[SoftwareRecord], fmt=None, formatting_option=None,
               destination_dir: Optional[str] = None, no_file: bool = False):
        """Délègue au ReportWriter (chemin écrit, ou records si no_file)"""
        return self.writer.report(records, fmt, formatting_option, destination_dir, no_file=no_file)

    def default_formatting(self, fmt: ReportFormat) -> Optional[str]:
        """Option de mise en forme configurée pour HTML/XML"""
        report_config = self.config.get_report_config()
        if fmt is ReportFormat.HTML:
            return report_config['html_formatting']
        if fmt is ReportFormat.XML:
            return report_config['xml_formatting']
        return None


def prompt_format(input_func=input, print_func=print) -> ReportFormat:
    """
    Demande le format du rapport jusqu'à obtenir une réponse valide

    Returns:
        ReportFormat: Format choisi
    """
    choices = ', '.join(f.value for f in ReportFormat)
    while True:
        answer = input_func(f"Format du rapport ({choices}): ")
        try:
            return ReportFormat.parse(answer)
        except ConfigurationError as e:
            print_func(f"❌ {e}")


def prompt_formatting(fmt: ReportFormat, input_func=input, print_func=print) -> FormattingOption:
    """
    Demande l'option de mise en forme d'un format HTML ou XML

    Returns:
        FormattingOption: Option choisie
    """
    allowed = REQUIRED_OPTIONS[fmt]
    choices = ', '.join(o.value for o in allowed)
    while True:
        answer = input_func(f"Mise en forme {fmt.value} ({choices}): ")
        try:
            option = FormattingOption.parse(answer)
        except ConfigurationError as e:
            print_func(f"❌ {e}")
            continue
        if option in allowed:
            return option
        print_func(f"❌ Option {option.value} invalide pour {fmt.value} (choix: {choices})")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='softaudit',
        description='SoftAudit - Inventaire des logiciels installés et export en rapport'
    )

    parser.add_argument(
        '--config', '-c',
        type=str,
        help='Chemin vers le fichier de configuration'
    )

    parser.add_argument(
        '--format', '-f',
        type=str.upper,
        choices=[f.value for f in ReportFormat],
        help='Format du rapport'
    )

    parser.add_argument(
        '--formatting', '-F',
        type=str.capitalize,
        choices=[o.value for o in FormattingOption],
        help='Mise en forme : Table/List (HTML), String/Stream (XML)'
    )

    parser.add_argument(
        '--output-dir', '-o',
        type=str,
        help='Dossier de destination du rapport'
    )

    parser.add_argument(
        '--no-file',
        action='store_true',
        help='Affiche la liste des logiciels au lieu d\'écrire un rapport'
    )

    parser.add_argument(
        '--create-config',
        action='store_true',
        help='Crée un fichier de configuration par défaut'
    )

    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Active les logs de débogage'
    )

    return parser


def main(argv=None, input_func=input, interactive: Optional[bool] = None, sources=None) -> int:
    """
    Point d'entrée principal avec gestion des arguments de ligne de commande

    Returns:
        int: Code de sortie (0 succès, 1 erreur)
    """
    args = build_parser().parse_args(argv)

    if args.create_config:
        config_path = args.config or AuditConfig().config_file
        try:
            create_default_config(config_path)
        except OSError as e:
            print(f"❌ Erreur création configuration: {e}")
            return 1
        print(f"✅ Configuration par défaut créée: {config_path}")
        return 0

    if interactive is None:
        interactive = sys.stdin.isatty()

    app = SoftAudit(args.config, verbose=args.verbose, sources=sources)

    for problem in app.config.validate():
        app.logger.warning(f"Erreur de configuration: {problem}")

    try:
        records = app.collect()

        if args.no_file:
            records = app.export(records, no_file=True)
            sys.stdout.write(app.writer.render(records, ReportFormat.TXT))
            return 0

        if args.format:
            fmt = ReportFormat.parse(args.format)
        elif interactive:
            fmt = prompt_format(input_func)
        else:
            fmt = ReportFormat.parse(app.config.get_report_config()['default_format'])

        formatting = args.formatting
        if formatting is None and fmt in REQUIRED_OPTIONS:
            if interactive:
                formatting = prompt_formatting(fmt, input_func)
            else:
                formatting = app.default_formatting(fmt)

        path = app.export(records, fmt, formatting, args.output_dir)
        print(f"✅ Rapport écrit: {path}")
        return 0

    except SoftAuditError as e:
        app.logger.error(str(e))
        print(f"❌ {e}")
        return 1
    except KeyboardInterrupt:
        print("\n🛑 Arrêt demandé par l'utilisateur")
        return 1
    except EOFError:
        # Entrée standard fermée pendant une question
        app.logger.error("Entrée interrompue avant la fin des questions")
        print("\n❌ Entrée interrompue")
        return 1
    except Exception:
        app.logger.exception("Erreur inattendue")
        return 1


if __name__ == '__main__':
    sys.exit(main())
