"""Hand-maintained catalogue of tools exposed next to the documentation."""

from __future__ import annotations

from typing import List, Tuple

from docmanifest.artifacts import Tool

# (name, description, schema file, related document paths)
TOOL_DEFINITIONS: Tuple[Tuple[str, str, str, Tuple[str, ...]], ...] = (
    (
        "toss_create_fund",
        "Create a new fund in TOSS Protocol",
        "create-fund.json",
        (
            "protocol/processes/fund-manager/create-fund",
            "protocol/contracts/fund/FundFactory",
        ),
    ),
    (
        "toss_execute_trade",
        "Execute validated trade through RiskEngine",
        "execute-trade.json",
        (
            "protocol/processes/fund-manager/execute-trade",
            "protocol/contracts/fund/FundTradeExecutor",
            "protocol/contracts/risk/RiskEngine",
        ),
    ),
    (
        "toss_deposit_to_fund",
        "Deposit capital into a fund",
        "deposit.json",
        (
            "protocol/processes/investor/deposit",
            "protocol/contracts/fund/FundManagerVault",
        ),
    ),
    (
        "toss_request_withdrawal",
        "Request withdrawal from fund",
        "withdraw.json",
        ("protocol/processes/investor/withdraw",),
    ),
    (
        "toss_create_proposal",
        "Create governance proposal",
        "create-proposal.json",
        (
            "protocol/processes/governance/fund-proposal",
            "protocol/processes/governance/fm-proposal",
            "protocol/processes/governance/protocol-proposal",
        ),
    ),
    (
        "toss_vote_on_proposal",
        "Cast vote on governance proposal",
        "vote.json",
        ("protocol/processes/governance/voting",),
    ),
    (
        "toss_get_fund_info",
        "Get comprehensive fund information",
        "get-fund-info.json",
        ("protocol/contracts/fund/FundRegistry",),
    ),
    (
        "toss_validate_trade",
        "Pre-validate trade before execution",
        "validate-trade.json",
        (
            "protocol/processes/risk-compliance/risk-validation",
            "protocol/contracts/risk/RiskEngine",
        ),
    ),
    (
        "toss_calculate_required_stake",
        "Calculate TOSS stake required for fund",
        "calculate-stake.json",
        ("protocol/contracts/fund/FundFactory",),
    ),
    (
        "toss_get_config_parameters",
        "Get current DAO configuration parameters",
        "get-config.json",
        (
            "protocol/tokenomics/config-layer",
            "protocol/contracts/core/DAOConfigCore",
        ),
    ),
)


def resource_uri(stem_path: str, scheme: str) -> str:
    return f"{scheme}://docs/{stem_path}"


def schema_uri(filename: str, scheme: str) -> str:
    return f"{scheme}://schemas/tools/{filename}"


def default_tools(scheme: str = "toss") -> List[Tool]:
    return [
        Tool(
            name=name,
            description=description,
            schema_uri=schema_uri(schema, scheme),
            related_docs=[resource_uri(path, scheme) for path in related],
        )
        for name, description, schema, related in TOOL_DEFINITIONS
    ]


def dangling_links(tools: List[Tool], uris: set[str]) -> List[Tuple[str, str]]:
    """Return ``(tool name, uri)`` for every related doc missing from ``uris``."""
    return [
        (tool.name, uri)
        for tool in tools
        for uri in tool.related_docs
        if uri not in uris
    ]
