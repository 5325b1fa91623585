from .models import Placeholder, Template

BLUEPRINT_HEADING_PREFIX = "# Strategic Account Blueprint for "

BLUEPRINT_SECTIONS = [
    "## 1. Executive Summary",
    "## 2. Intelligence Briefing",
    "## 3. Executive Engagement Map",
    "## 4. Competitive Landscape",
    "## 5. Engagement Blueprint",
]

BLUEPRINT_BODY = """
You are a senior strategic account executive preparing for a first executive
meeting with {CustomerName}. Build a Strategic Account Blueprint using only
publicly available information: annual reports, investor presentations,
earnings call transcripts, press releases, regulatory filings and reputable
news coverage.

Research rules:
- Cite the source and its date for every figure and quotation.
- Prefer the most recent fiscal year; label anything older than 18 months.
- If a fact cannot be verified from public sources, write "Not publicly
  disclosed" instead of estimating it.
- Do not include personal data about individuals beyond their public role.

Write the document in Markdown using exactly the outline below. Keep the
headings verbatim and in this order. Do not add or remove sections.

# Strategic Account Blueprint for {CustomerName}

## 1. Executive Summary

Three to five sentences: who {CustomerName} is, where the business is heading
and the single most compelling reason to engage now.

## 2. Intelligence Briefing

- Company snapshot: industry, headquarters, employees, revenue, growth rate.
- Financial health: revenue trend, margins and guidance from the last three
  reported periods, as a table.
- Stated strategic priorities, quoted from leadership with sources.
- Recent triggers: acquisitions, leadership changes, restructurings,
  regulatory events, major announcements.

## 3. Executive Engagement Map

A table with one row per executive:

| Name | Title | Public Priorities | Likely Concerns | Engagement Angle |
|---|---|---|---|---|

Identify the likely economic buyer, technical decision makers and potential
champions, and explain the reasoning for each.

## 4. Competitive Landscape

- Main competitors of {CustomerName} and how it positions against them.
- Incumbent vendors and partners visible in public sources.
- Threats and opportunities for our engagement, as a SWOT-style table.

## 5. Engagement Blueprint

- Value hypotheses tied to the priorities in section 2.
- A 30/60/90-day engagement plan with owners and measurable outcomes.
- Discovery questions for the first executive meeting.
- Risks to the engagement and how to mitigate them.
"""

BLUEPRINT_TEMPLATE = Template.from_body(
    id="blueprint",
    title="Strategic Account Blueprint",
    description="Instructs a model to write a strategic sales document from public company data.",
    body=BLUEPRINT_BODY,
    placeholders=[
        Placeholder(name="CustomerName", description="Name of the customer company."),
    ],
    required_sections=[BLUEPRINT_HEADING_PREFIX, *BLUEPRINT_SECTIONS],
)
