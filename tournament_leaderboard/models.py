"""
Pydantic data models for tournament results and player configs.

These models give the decoders a typed contract: the CSV decoder
produces PlayerRecord objects and the YAML decoder produces PlayerConfig
objects. Everything downstream (engine, charts, export) works on these.
"""

from typing import Optional, Union
from pydantic import BaseModel, Field

NOT_AVAILABLE = "N/A"

# Malformed numeric cells decode to float('nan'), so integer columns
# accept a float as well.
IntOrNaN = Union[int, float]


class PlayerRecord(BaseModel):
    """
    One row of decoded tournament results.

    Immutable once created. `player` is the natural key.
    """
    rank: IntOrNaN = Field(..., description="1-based leaderboard rank")
    player: str = Field(..., min_length=1, description="Unique player identifier")
    rating_mu: float = Field(..., description="Rating mean")
    rating_sigma: float = Field(..., description="Rating uncertainty")
    wins: IntOrNaN = Field(..., description="Games won")
    draws: IntOrNaN = Field(..., description="Games drawn")
    losses: IntOrNaN = Field(..., description="Games lost")
    games: IntOrNaN = Field(..., description="Games played (wins + draws + losses)")
    win_rate: float = Field(..., description="Win rate in [0, 1]")

    class Config:
        frozen = True
        json_schema_extra = {
            "example": {
                "rank": 1,
                "player": "Alpha",
                "rating_mu": 31.42,
                "rating_sigma": 1.87,
                "wins": 9,
                "draws": 1,
                "losses": 2,
                "games": 12,
                "win_rate": 0.75
            }
        }

    def to_dict(self) -> dict:
        """Convert to a plain dictionary in column order."""
        return self.model_dump()


class ModelDescriptor(BaseModel):
    """The LLM an agent slot runs on."""
    provider: Optional[str] = Field(None, description="Model provider (e.g., 'openai')")
    name: Optional[str] = Field(None, description="Model name (e.g., 'gpt-4o')")

    def label(self) -> str:
        """Format as 'provider - name'."""
        return f"{self.provider or NOT_AVAILABLE} - {self.name or NOT_AVAILABLE}"


class PromptPair(BaseModel):
    """System prompt and per-step prompt of an agent slot."""
    system_prompt: Optional[str] = Field(None, description="Prompt sent once at game start")
    step_wise_prompt: Optional[str] = Field(None, description="Prompt sent every step")


class AgentSlot(BaseModel):
    """One of the two agents that make up a player."""
    model: Optional[ModelDescriptor] = None
    prompts: Optional[PromptPair] = None

    def model_label(self) -> str:
        return self.model.label() if self.model else NOT_AVAILABLE

    def system_prompt(self) -> str:
        if self.prompts and self.prompts.system_prompt:
            return self.prompts.system_prompt
        return NOT_AVAILABLE

    def step_prompt(self) -> str:
        if self.prompts and self.prompts.step_wise_prompt:
            return self.prompts.step_wise_prompt
        return NOT_AVAILABLE


class PlayerConfig(BaseModel):
    """
    Per-player metadata decoded from a YAML config file.

    Both agent slots are optional; anything missing resolves to "N/A"
    when displayed. Unknown keys in the YAML are ignored.
    """
    agent0: Optional[AgentSlot] = None
    agent1: Optional[AgentSlot] = None

    class Config:
        json_schema_extra = {
            "example": {
                "agent0": {
                    "model": {"provider": "openai", "name": "gpt-4o"},
                    "prompts": {
                        "system_prompt": "You are playing a negotiation game...",
                        "step_wise_prompt": "It is your turn. The board is..."
                    }
                },
                "agent1": {
                    "model": {"provider": "anthropic", "name": "claude-3-5-sonnet"}
                }
            }
        }

    def slot(self, name: str) -> AgentSlot:
        """Return the named agent slot, or an empty one when absent."""
        return getattr(self, name, None) or AgentSlot()


def model_info(config: Optional[PlayerConfig]) -> dict[str, str]:
    """
    Model labels for both agent slots.

    Args:
        config: Player config, or None when the player has none

    Returns:
        dict: {"agent0": "provider - name" | "N/A", "agent1": ...}
    """
    if config is None:
        return {"agent0": NOT_AVAILABLE, "agent1": NOT_AVAILABLE}
    return {
        "agent0": config.slot("agent0").model_label(),
        "agent1": config.slot("agent1").model_label(),
    }


def prompts_info(config: Optional[PlayerConfig]) -> dict[str, str]:
    """
    All four prompts of a player, "N/A" where missing.

    Returns:
        dict with agent0_system, agent0_step, agent1_system, agent1_step
    """
    if config is None:
        return {
            "agent0_system": NOT_AVAILABLE,
            "agent0_step": NOT_AVAILABLE,
            "agent1_system": NOT_AVAILABLE,
            "agent1_step": NOT_AVAILABLE,
        }
    agent0 = config.slot("agent0")
    agent1 = config.slot("agent1")
    return {
        "agent0_system": agent0.system_prompt(),
        "agent0_step": agent0.step_prompt(),
        "agent1_system": agent1.system_prompt(),
        "agent1_step": agent1.step_prompt(),
    }
