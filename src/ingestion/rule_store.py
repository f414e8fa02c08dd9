"""
Rule Store
Persists the user-edited header synonyms and product rules as JSON.

File layout:
    {
        "header_mapping": {"receiver": ["수취인", ...], ...},
        "product_rules": [["반숙", "반숙란 30구"], ...]
    }
"""
import json
from pathlib import Path
from typing import Optional, Tuple

import config
from order_consolidation.rules import HeaderRuleTable, ProductRuleTable
from utils.logger import get_logger


class RuleStoreError(Exception):
    """The rules file exists but cannot be used"""


class RuleStore:
    """Load and save both rule tables"""

    def __init__(self, path: Optional[str] = None):
        self.path = Path(path or config.RULES_FILE)

    def exists(self) -> bool:
        return self.path.exists()

    def load(self) -> Tuple[HeaderRuleTable, ProductRuleTable]:
        """
        Read the rule tables

        Returns:
            (header_rules, product_rules); defaults when no file is saved yet
        """
        if not self.exists():
            return HeaderRuleTable.defaults(), ProductRuleTable.defaults()

        try:
            data = json.loads(self.path.read_text(encoding='utf-8'))
        except (OSError, json.JSONDecodeError) as e:
            raise RuleStoreError(f"Cannot read rules file {self.path}: {e}") from e

        if not isinstance(data, dict):
            raise RuleStoreError(f"Rules file {self.path} must hold a JSON object")

        try:
            header_rules = HeaderRuleTable.from_dict(data.get('header_mapping'))
            product_rules = ProductRuleTable.from_dict(data.get('product_rules'))
        except (AttributeError, TypeError, ValueError) as e:
            raise RuleStoreError(f"Invalid rules in {self.path}: {e}") from e

        get_logger().info(
            f"Loaded rules from {self.path} ({len(product_rules)} product rule(s))",
            component="RuleStore"
        )
        return header_rules, product_rules

    def save(self, header_rules: HeaderRuleTable, product_rules: ProductRuleTable):
        """Write both tables, replacing the previous file"""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        payload = {
            'header_mapping': header_rules.to_dict(),
            'product_rules': product_rules.to_list(),
        }
        self.path.write_text(
            json.dumps(payload, ensure_ascii=False, indent=2),
            encoding='utf-8'
        )
        get_logger().info(f"Saved rules to {self.path}", component="RuleStore")

    def reset(self) -> Tuple[HeaderRuleTable, ProductRuleTable]:
        """Overwrite the saved rules with the defaults"""
        header_rules, product_rules = HeaderRuleTable.defaults(), ProductRuleTable.defaults()
        self.save(header_rules, product_rules)
        return header_rules, product_rules
