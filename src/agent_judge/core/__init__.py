"""Core evaluation logic.

This subpackage contains the judge abstractions, the voting strategies
and the two jury variants.

Key modules:
    - judge: Judge base classes and adapters
    - voting: Majority, consensus and weighted voting
    - jury: Jury base class and the flat SimpleJury
    - cascade: CascadedJury tiered escalation
"""

from agent_judge.core.judge import (
    Judge,
    DeterministicJudge,
    FunctionJudge,
    as_judge,
    CheckSuiteJudge,
    NamedJudge,
    TimeoutJudge,
    with_timeout,
    judge_name,
    evaluate_async,
)
from agent_judge.core.voting import (
    VoteTally,
    tally,
    VotingStrategy,
    MajorityVotingStrategy,
    ConsensusStrategy,
    WeightedVotingStrategy,
)
from agent_judge.core.jury import (
    Jury,
    JuryConfigurationError,
    SimpleJury,
    vote_async,
)
from agent_judge.core.cascade import (
    CascadedJury,
    CascadeConfigurationError,
    build_cascade,
)

__all__ = [
    # judge
    "Judge",
    "DeterministicJudge",
    "FunctionJudge",
    "as_judge",
    "CheckSuiteJudge",
    "NamedJudge",
    "TimeoutJudge",
    "with_timeout",
    "judge_name",
    "evaluate_async",
    # voting
    "VoteTally",
    "tally",
    "VotingStrategy",
    "MajorityVotingStrategy",
    "ConsensusStrategy",
    "WeightedVotingStrategy",
    # jury
    "Jury",
    "JuryConfigurationError",
    "SimpleJury",
    "vote_async",
    # cascade
    "CascadedJury",
    "CascadeConfigurationError",
    "build_cascade",
]
