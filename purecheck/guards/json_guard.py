"""
JSON Guard Layer - parsing of model-generated JSON

Model output often wraps otherwise valid JSON in code fences or prose, or
leaves trailing commas behind. The guard applies a small set of repairs in
order and parses after each one. It never retries the generation and never
substitutes a default value: if nothing parses, JSONRepairError is raised.
"""

import json
import re
from typing import Any, Callable, Dict, List, Optional
from dataclasses import dataclass
import logging

logger = logging.getLogger(__name__)


@dataclass
class JSONGuardConfig:
    """JSON guard settings"""
    enable_repair: bool = True
    max_input_chars: int = 200_000


class JSONRepairError(Exception):
    """No repair produced parseable JSON"""
    pass


class JSONGuard:
    """
    JSON guard layer

    1. Direct parse
    2. Repairs: code fences, trailing commas, JSON embedded in prose,
       unbalanced closing brackets
    """

    def __init__(self, config: Optional[JSONGuardConfig] = None):
        self.config = config or JSONGuardConfig()
        self.repair_attempts = 0
        self.repair_successes = 0

    def parse(self, json_string: str) -> Dict[str, Any]:
        """
        Parse a JSON object, repairing common defects

        Raises:
            JSONRepairError: input is empty, too large, or cannot be repaired
        """
        if not json_string or not json_string.strip():
            raise JSONRepairError("Empty JSON input")
        if len(json_string) > self.config.max_input_chars:
            raise JSONRepairError(f"JSON input too large ({len(json_string)} chars)")

        try:
            return self._expect_object(json.loads(json_string))
        except json.JSONDecodeError as e:
            logger.warning(f"Initial JSON parse failed: {e}")

        if self.config.enable_repair:
            result = self._repair_json(json_string)
            if result is not None:
                return result

        raise JSONRepairError(f"Could not parse JSON after {len(self._repairs())} repair strategies")

    def _repairs(self) -> List[Callable[[str], str]]:
        return [
            self._remove_code_blocks,
            self._remove_trailing_commas,
            self._extract_json_from_text,
            self._complete_incomplete_json,
        ]

    def _repair_json(self, json_string: str) -> Optional[Dict[str, Any]]:
        """Apply repairs cumulatively, parsing after each one"""
        self.repair_attempts += 1

        repaired = json_string
        for repair_func in self._repairs():
            repaired = repair_func(repaired)
            try:
                result = self._expect_object(json.loads(repaired))
            except json.JSONDecodeError:
                continue
            logger.info(f"JSON repaired successfully using {repair_func.__name__}")
            self.repair_successes += 1
            return result

        logger.error("All repair strategies failed")
        return None

    @staticmethod
    def _expect_object(value: Any) -> Dict[str, Any]:
        if not isinstance(value, dict):
            raise JSONRepairError(f"Expected a JSON object, got {type(value).__name__}")
        return value

    @staticmethod
    def _remove_code_blocks(text: str) -> str:
        """Strip ```json ... ``` markers"""
        text = re.sub(r'```(?:json|JSON)?\s*', '', text)
        return text.strip()

    @staticmethod
    def _remove_trailing_commas(text: str) -> str:
        """Drop commas directly before } or ]"""
        return re.sub(r',\s*([}\]])', r'\1', text)

    @staticmethod
    def _extract_json_from_text(text: str) -> str:
        """Outermost {...} span, dropping surrounding prose"""
        start = text.find('{')
        end = text.rfind('}')
        if start != -1 and end > start:
            return text[start:end + 1]
        return text

    @staticmethod
    def _complete_incomplete_json(text: str) -> str:
        """Close brackets and braces left open by a truncated response"""
        stack = []
        in_string = False
        escaped = False
        for ch in text:
            if in_string:
                if escaped:
                    escaped = False
                elif ch == '\\':
                    escaped = True
                elif ch == '"':
                    in_string = False
                continue
            if ch == '"':
                in_string = True
            elif ch in '{[':
                stack.append('}' if ch == '{' else ']')
            elif ch in '}]' and stack and stack[-1] == ch:
                stack.pop()

        if in_string or not stack:
            return text
        return text.rstrip().rstrip(',') + ''.join(reversed(stack))


__all__ = ["JSONGuard", "JSONGuardConfig", "JSONRepairError"]
