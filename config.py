import os
import yaml

ROOT_PATH = os.path.dirname(__file__)
CONFIG_FILE_PATH = os.path.join(ROOT_PATH, "env.yaml")

if os.path.exists(CONFIG_FILE_PATH):
    with open(CONFIG_FILE_PATH, "r") as r_file:
        data = yaml.safe_load(r_file) or dict()
else:
    data = dict()


class ApplicationConfig:
    DEFAULT_LOCALE = data.get("DEFAULT_LOCALE", "en")

    # Reference data (currencies + translations). None = packaged tables
    REFERENCE_DATA_DIR = data.get("REFERENCE_DATA_DIR", None)
    STRICT_TRANSLATIONS = bool(data.get("STRICT_TRANSLATIONS", True))

    # Footer composition
    FOOTER_LINE_BREAK = data.get("FOOTER_LINE_BREAK", "<br>")
    PAYMENT_INFO_DELIMITER = data.get("PAYMENT_INFO_DELIMITER", " - ")

    # PDF output
    ACCENT_COLOR = data.get("ACCENT_COLOR", "#444444")
    RULE_COLOR = data.get("RULE_COLOR", "#aaaaaa")
    PDF_COMPRESS = bool(data.get("PDF_COMPRESS", False))
