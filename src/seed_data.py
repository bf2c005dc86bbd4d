"""
Initial catalog content, written once into empty collections.

Every entry carries a pre-assigned id; seeding never derives ids from names.
"""

from __future__ import annotations

CATEGORIES: list[dict[str, str]] = [
    {"id": "accounting", "name": "Accounting"},
    {"id": "compliance", "name": "Compliance"},
    {"id": "financial-planning", "name": "Financial Planning"},
    {"id": "fraud-detection", "name": "Fraud Detection"},
    {"id": "tax", "name": "Tax"},
    {"id": "trading", "name": "Trading"},
]

AGENTS: list[dict] = [
    {
        "id": "ledgerly",
        "name": "Ledgerly",
        "description": "Reconciles bank feeds against the general ledger and drafts journal entries for review.",
        "company": "Ledgerly Labs",
        "category": ["Accounting"],
        "logo_url": "https://placehold.co/128x128?text=L",
        "website_url": "https://example.com/ledgerly",
        "pricing": "freemium",
        "features": ["Bank reconciliation", "Journal entry drafts", "Month-end checklist"],
    },
    {
        "id": "taxpilot",
        "name": "TaxPilot",
        "description": "Answers tax questions with citations and prepares quarterly estimate worksheets.",
        "company": "Pilot Financial",
        "category": ["Tax", "Financial Planning"],
        "logo_url": "https://placehold.co/128x128?text=T",
        "website_url": "https://example.com/taxpilot",
        "pricing": "paid",
        "features": ["Cited answers", "Quarterly estimates"],
    },
    {
        "id": "sentinel-aml",
        "name": "Sentinel AML",
        "description": "Monitors transactions for money-laundering patterns and writes suspicious activity narratives.",
        "company": "Northwind Risk",
        "category": ["Compliance", "Fraud Detection"],
        "logo_url": "https://placehold.co/128x128?text=S",
        "website_url": "https://example.com/sentinel",
        "pricing": "enterprise",
        "features": ["Transaction monitoring", "SAR narratives", "Case triage"],
    },
    {
        "id": "quantmate",
        "name": "QuantMate",
        "description": "Backtests trading ideas described in plain English and explains the resulting risk profile.",
        "company": "Helix Quant",
        "category": ["Trading"],
        "logo_url": "https://placehold.co/128x128?text=Q",
        "website_url": "https://example.com/quantmate",
        "pricing": "paid",
        "features": ["Natural-language backtests", "Drawdown analysis"],
    },
    {
        "id": "budgetbuddy",
        "name": "BudgetBuddy",
        "description": "Categorises household spending and proposes a monthly savings plan.",
        "company": "Acorn Apps",
        "category": ["Financial Planning"],
        "website_url": "https://example.com/budgetbuddy",
        "pricing": "free",
        "features": ["Spending categories", "Savings goals"],
    },
    {
        "id": "fraudlens",
        "name": "FraudLens",
        "description": "Scores card-not-present payments in real time and explains every decline.",
        "company": "Globex Payments",
        "category": ["Fraud Detection"],
        "logo_url": "https://placehold.co/128x128?text=F",
        "website_url": "https://example.com/fraudlens",
        "pricing": "enterprise",
        "features": ["Real-time scoring", "Decline explanations"],
    },
    {
        "id": "auditmind",
        "name": "AuditMind",
        "description": "Samples ledgers, flags anomalies, and assembles audit workpapers.",
        "company": "Ledgerly Labs",
        "category": ["Accounting", "Compliance"],
        "website_url": "https://example.com/auditmind",
        "pricing": "paid",
        "features": ["Anomaly detection", "Workpaper assembly"],
    },
    {
        "id": "invoiceiq",
        "name": "InvoiceIQ",
        "description": "Extracts line items from supplier invoices and routes them for approval.",
        "company": "Acme Finance",
        "category": ["Accounting"],
        "logo_url": "https://placehold.co/128x128?text=I",
        "website_url": "https://example.com/invoiceiq",
        "pricing": "freemium",
        "features": ["Line-item extraction", "Approval routing"],
    },
]

INSIGHTS: list[dict] = [
    {
        "id": "how-ai-agents-are-reshaping-month-end-close",
        "title": "How AI Agents Are Reshaping Month-End Close",
        "summary": "Reconciliation agents cut close times, but controls still need a human owner.",
        "content": (
            "Finance teams are handing bank reconciliation and accrual drafts to agents. "
            "The teams that benefit most keep review steps explicit and auditable."
        ),
        "author": "Priya Raman",
        "published_at": "2024-03-04",
        "image_url": "https://placehold.co/1200x630?text=Month-End",
        "tags": ["Accounting", "Operations"],
    },
    {
        "id": "choosing-a-fraud-detection-agent",
        "title": "Choosing a Fraud Detection Agent",
        "summary": "Latency, explainability and false-positive cost matter more than headline accuracy.",
        "content": (
            "A fraud model that cannot explain a decline creates support tickets. "
            "Ask vendors for decline reasons, scoring latency and chargeback data."
        ),
        "author": "Marcus Lee",
        "published_at": "2024-04-18",
        "image_url": "https://placehold.co/1200x630?text=Fraud",
        "tags": ["Fraud Detection"],
    },
    {
        "id": "tax-season-with-an-ai-copilot",
        "title": "Tax Season with an AI Copilot",
        "summary": "Where tax assistants help, and where they still need a professional.",
        "content": (
            "Citation-backed answers speed up research. "
            "Filing positions and edge cases still belong to a credentialed preparer."
        ),
        "author": "Dana Okafor",
        "published_at": "2024-02-12",
        "tags": ["Tax"],
    },
    {
        "id": "regulators-and-autonomous-finance",
        "title": "Regulators and Autonomous Finance",
        "summary": "A short guide to model-risk expectations for agents that move money.",
        "content": (
            "Supervisors expect inventories, validation and monitoring for models in production. "
            "Agents that initiate payments fall squarely inside that scope."
        ),
        "author": "Priya Raman",
        "published_at": "2024-05-30",
        "image_url": "https://placehold.co/1200x630?text=Regulation",
        "tags": ["Compliance"],
    },
]
