"""
Module de logging pour SoftAudit

Ce module fournit un système de logging centralisé avec :
- Rotation automatique des logs
- Différents niveaux de log
- Formatage cohérent
"""

import os
import sys
import logging
import logging.handlers

from .config import default_log_path


LOGGER_NAME = 'SoftAudit'


class AuditLogger:
    """
    Gestionnaire de logging pour SoftAudit

    Cette classe configure le logger de l'application : un fichier avec
    rotation automatique et une sortie console sur stderr (stdout reste
    réservé au contenu des rapports).
    """

    def __init__(self, config=None, verbose: bool = False):
        """
        Initialise le système de logging

        Args:
            config: Instance de AuditConfig pour récupérer les paramètres de log
            verbose: Force le niveau DEBUG
        """
        self.config = config
        self.verbose = verbose
        self.logger = logging.getLogger(LOGGER_NAME)

        # Éviter la duplication si déjà configuré
        if not self.logger.handlers:
            self._setup_logging()

    def _setup_logging(self):
        """
        Configure le système de logging avec les handlers appropriés
        """
        if self.config:
            log_config = self.config.get_logging_config()
        else:
            log_config = {
                'log_level': 'INFO',
                'log_file': default_log_path(),
                'max_log_size': 10485760,  # 10MB
                'backup_count': 5,
            }

        log_level_str = 'DEBUG' if self.verbose else log_config['log_level']
        log_level = getattr(logging, log_level_str.upper(), logging.INFO)
        self.logger.setLevel(log_level)

        formatter = logging.Formatter(
            fmt='%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )

        # Handler pour fichier avec rotation
        log_file = log_config['log_file']
        try:
            log_dir = os.path.dirname(log_file)
            if log_dir:
                os.makedirs(log_dir, exist_ok=True)

            file_handler = logging.handlers.RotatingFileHandler(
                filename=log_file,
                maxBytes=log_config['max_log_size'],
                backupCount=log_config['backup_count'],
                encoding='utf-8'
            )
            file_handler.setLevel(log_level)
            file_handler.setFormatter(formatter)
            self.logger.addHandler(file_handler)

        except OSError as e:
            print(f"Erreur lors de la configuration du logging fichier: {e}", file=sys.stderr)

        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(log_level)
        console_handler.setFormatter(logging.Formatter(fmt='%(levelname)s - %(message)s'))
        self.logger.addHandler(console_handler)

        self.logger.debug(f"Système de logging initialisé (niveau {log_level_str}, fichier {log_file})")

    def get_logger(self) -> logging.Logger:
        """
        Retourne l'instance du logger

        Returns:
            logging.Logger: Instance du logger configuré
        """
        return self.logger

    def close(self):
        """Ferme et retire tous les handlers du logger"""
        for handler in list(self.logger.handlers):
            handler.close()
            self.logger.removeHandler(handler)

    def debug(self, message: str):
        """Log un message de niveau DEBUG"""
        self.logger.debug(message)

    def info(self, message: str):
        """Log un message de niveau INFO"""
        self.logger.info(message)

    def warning(self, message: str):
        """Log un message de niveau WARNING"""
        self.logger.warning(message)

    def error(self, message: str):
        """Log un message de niveau ERROR"""
        self.logger.error(message)

    def exception(self, message: str):
        """
        Log une exception avec sa stack trace

        Args:
            message: Message descriptif de l'erreur
        """
        self.logger.exception(message)

