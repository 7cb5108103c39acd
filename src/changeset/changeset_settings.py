from dataclasses import dataclass
import json

from changeset.changeset_types import CleanupPolicy


@dataclass
class DiffEngineSettings:
    """
    Tuning for a diff engine.

    This class handles the loading and saving of settings to a JSON file.
    """
    timeout: float = 1.0  # Seconds a diff may spend exploring, 0 for no limit
    edit_cost: int = 4  # Cost of one extra edit, in characters, for efficiency cleanup
    default_policy: CleanupPolicy = CleanupPolicy.EFFICIENCY

    def __post_init__(self) -> None:
        if self.timeout < 0:
            raise ValueError(f"timeout must not be negative: {self.timeout}")

        if self.edit_cost < 0:
            raise ValueError(f"edit_cost must not be negative: {self.edit_cost}")

    @classmethod
    def load(cls, path: str) -> "DiffEngineSettings":
        """Load settings from a JSON file."""
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
            diff = data.get("diff", {})

            # Policies are stored by name so the file stays readable
            policy_name = diff.get("defaultPolicy", CleanupPolicy.EFFICIENCY.name)
            if not isinstance(policy_name, str) or policy_name.upper() not in CleanupPolicy.__members__:
                raise ValueError(f"Unknown cleanup policy in {path}: {policy_name}")

            return cls(
                timeout=diff.get("timeout", 1.0),
                edit_cost=diff.get("editCost", 4),
                default_policy=CleanupPolicy[policy_name.upper()]
            )

    def save(self, path: str) -> None:
        """Save settings to a JSON file."""
        data = {
            "diff": {
                "timeout": self.timeout,
                "editCost": self.edit_cost,
                "defaultPolicy": self.default_policy.name,
            },
        }
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(data, f, indent=2)
