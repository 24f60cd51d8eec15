"""
Agent Judge - evaluation aggregation for automated agent output.

Runs independent judges against an agent's artifact and combines
their opinions into one decision, either through a flat jury with a
voting strategy or through a tiered cascade that escalates from cheap
deterministic judges to expensive semantic ones only when needed.

Main entry points:
    - agent_judge.core.jury: SimpleJury for a flat set of judges
    - agent_judge.core.cascade: CascadedJury and build_cascade()
    - agent_judge.core.voting: built-in voting strategies
    - agent_judge.models: Judgment, Verdict, JudgmentContext, ...
"""
