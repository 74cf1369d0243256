"""
Default records loaded into a fresh store at startup.

Page ``content`` values are JSON strings whose shape is page-specific
(``intro`` / ``projectScope`` / ``timeline`` blocks and so on); the store
treats them as opaque text.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from pilothub.core.logging import get_logger
from pilothub.store.models import (
    PageContentDraft,
    QuickNavItemDraft,
    SprintDraft,
    TeamMemberDraft,
    UserDraft,
)

if TYPE_CHECKING:
    from pilothub.store.memory import MemStore

logger = get_logger(__name__)


def _page(page_name: str, title: str, subtitle: str, content: dict[str, Any]) -> PageContentDraft:
    return PageContentDraft(
        page_name=page_name,
        title=title,
        subtitle=subtitle,
        content=json.dumps(content),
    )


DEFAULT_PAGES: list[PageContentDraft] = [
    _page(
        "home",
        "Project Documentation Hub",
        "Comprehensive documentation for our 12-week capstone project",
        {
            "intro": {
                "title": "Welcome to Project Pilots",
                "content": (
                    "This documentation hub serves as the central repository for all artifacts, "
                    "progress updates, and deliverables related to our 12-week capstone project. "
                    "Navigate through the different sections using the sidebar to explore team "
                    "information, project sprints, and more."
                ),
            },
            "projectScope": {
                "title": "Project Scope: Scope of Work",
                "content": (
                    "We're partnering with The Knots Studio, a heart-first, style-savvy gifting "
                    "startup from Bangalore, to design a clean, modern business website that "
                    "reflects the brand's charm and purpose. Our scope includes crafting a "
                    "mobile-friendly, SEO-optimized website that showcases their story, services, "
                    "and gifting galleries, while making it easy for potential clients to discover "
                    "and connect with their offerings."
                ),
            },
            "timeline": {
                "title": "Project Timeline",
                "content": "12 weeks (January 15 - April 8, 2025)",
                "progress": 75,
                "currentWeek": "Week 9 of 12",
            },
            "updates": {
                "title": "Latest Updates",
                "items": [
                    "Sprint 4 completed with all deliverables",
                    "Team retrospective scheduled for April 22",
                    "Client presentation draft submitted",
                ],
            },
        },
    ),
    _page(
        "team",
        "Meet Project Pilots",
        "The dedicated members behind this project",
        {"intro": {"title": "Meet Project Pilots", "content": ""}},
    ),
    _page(
        "team-charter",
        "Team Charter",
        "Our guiding principles and project governance",
        {
            "intro": {
                "title": "Project Pilots - The KnotStudio Capstone Team",
                "content": (
                    "The Project Pilots are a team of six graduate students collaborating to "
                    "deliver a real-world capstone project for The KnotStudio. This charter "
                    "defines our shared purpose, working structure, communication practices, "
                    "and guiding principles."
                ),
            },
            "mission": {
                "title": "Purpose",
                "content": (
                    "Our objective is to plan, manage, and execute a high-quality project using "
                    "project management tools and methodologies, aligning client expectations "
                    "with academic outcomes through Agile, Scrum, and Waterfall practices."
                ),
            },
            "values": {
                "title": "Team Composition & Strengths",
                "items": [
                    {
                        "title": "Team Composition",
                        "content": (
                            "Our team members bring varied experience from event planning, IT, "
                            "construction, biotech, and operations. We rotate the role of Scrum "
                            "Master weekly."
                        ),
                    },
                    {
                        "title": "Scrum Master",
                        "content": "Leads weekly planning, progress tracking, and team coordination.",
                    },
                    {
                        "title": "Developer Team",
                        "content": (
                            "Executes project deliverables with responsibilities adjusted weekly "
                            "based on the project phase."
                        ),
                    },
                    {
                        "title": "Team Strengths",
                        "content": "Strong organizational, analytical, and execution skills.",
                    },
                    {
                        "title": "Growth Areas",
                        "content": (
                            "We balance team responsibilities to grow in strategic thinking and "
                            "creative problem-solving."
                        ),
                    },
                ],
            },
            "agreements": {
                "title": "Tools & Communication",
                "communication": {
                    "title": "Platforms",
                    "items": [
                        "Microsoft Teams (documentation, meetings)",
                        "Email (formal updates)",
                        "WhatsApp (real-time updates)",
                    ],
                },
                "decisions": {
                    "title": "Meetings",
                    "items": [
                        "Mondays: Virtual team meeting",
                        "Wednesdays: In-class check-in",
                        "Saturdays: Informal WhatsApp updates",
                        "Thursdays: Weekly client check-in (virtual)",
                    ],
                },
            },
            "conflict": {
                "title": "Ground Rules & Conflict Resolution",
                "items": [
                    "Attendance is mandatory at all meetings unless excused in advance.",
                    "All assigned work must be completed on time.",
                    "Drafts are expected 48 hours prior to deadlines for peer review.",
                    "Final versions are submitted at least 4 hours before the official deadline.",
                    "Conflicts are addressed through open dialogue, mediated by the Scrum Master if needed.",
                    "Major decisions are made through team consensus.",
                ],
            },
            "signatures": {
                "title": "Team Member Signatures",
                "content": (
                    "By signing this charter, each team member agrees to uphold these principles "
                    "throughout the project."
                ),
            },
        },
    ),
    _page(
        "project-sprints",
        "Project Sprints",
        "",
        {
            "intro": {"title": "Project Sprints Timeline", "content": ""},
            "currentSprint": {
                "title": "Current Sprint Details",
                "name": "Sprint 2: Sponsor Research & Scope",
                "date": "April 23 - May 7, 2025",
                "status": "Completed",
                "goals": [
                    "Gather sponsor information for The Knots Studio",
                    "Update team charter with client requirements",
                    "Create draft scope document",
                    "Prepare weekly status reports",
                    "Conduct initial client needs analysis",
                ],
                "progress": 100,
                "tasks": "10 of 10 tasks completed (100%)",
                "metrics": [
                    {"name": "Stories", "value": "12/12"},
                    {"name": "Story Points", "value": "45/45"},
                    {"name": "Tasks Completed", "value": "10"},
                ],
            },
        },
    ),
    _page(
        "retrospective",
        "Retrospective",
        "Team reflections and continuous improvement",
        {
            "intro": {
                "title": "Sprint Retrospectives",
                "content": "Regular reflection on our process, achievements, and areas for improvement",
            },
            "placeholder": "Detailed retrospective content will be added following each sprint completion.",
        },
    ),
    _page(
        "collaboration",
        "Collaboration",
        "",
        {
            "intro": {"title": "Team Collaboration", "content": ""},
            "placeholder": "Collaboration documentation is currently being updated.",
        },
    ),
    _page(
        "jira",
        "Jira Integration",
        "Task tracking and project management",
        {
            "intro": {
                "title": "Jira Dashboard",
                "content": "Integration with our project management system",
            },
            "placeholder": "Jira integration is in progress.",
        },
    ),
    _page(
        "clients-project",
        "Client's Project",
        "Details about our client and project scope",
        {
            "intro": {
                "title": "Client Project Overview",
                "content": "Information about our client and the project requirements",
            },
            "placeholder": "Client project information is currently being updated.",
        },
    ),
]

DEFAULT_TEAM_MEMBERS: list[TeamMemberDraft] = [
    TeamMemberDraft(
        name="Jane Doe",
        role="Project Manager",
        description=(
            "Experienced in leading cross-functional teams and ensuring project deliverables "
            "meet timelines."
        ),
        initials="JD",
        skills=["Leadership", "Agile", "Communication"],
    ),
    TeamMemberDraft(
        name="John Smith",
        role="Lead Developer",
        description=(
            "Focused on architecture and implementation of technical solutions with a focus "
            "on scalability."
        ),
        initials="JS",
        skills=["Full-Stack", "API Design", "Cloud"],
    ),
    TeamMemberDraft(
        name="Amy Lee",
        role="UX Designer",
        description="Creates user-centered designs with a focus on accessibility and intuitive interactions.",
        initials="AL",
        skills=["UI/UX", "Prototyping", "User Research"],
    ),
    TeamMemberDraft(
        name="Michael Johnson",
        role="Data Analyst",
        description=(
            "Specializes in data modeling, analysis, and creating insightful visualizations "
            "for decision making."
        ),
        initials="MJ",
        skills=["Analytics", "Data Science", "Visualization"],
    ),
    TeamMemberDraft(
        name="Sarah Parker",
        role="Business Analyst",
        description="Bridges technical and business requirements, ensuring solutions align with stakeholder needs.",
        initials="SP",
        skills=["Requirements", "Documentation", "Testing"],
    ),
]

DEFAULT_SPRINTS: list[SprintDraft] = [
    SprintDraft(
        name="Sprint 1",
        subtitle="Team Setup & Foundation",
        date_range="Apr 9 - Apr 22, 2025",
        status="Completed",
        deliverables=[
            "Team member bios and profiles",
            "Team name and identity",
            "Project website setup",
            "Team charter creation",
            "Sprint planning",
            "Create Jira Scrum board",
        ],
    ),
    SprintDraft(
        name="Sprint 2",
        subtitle="Sponsor Research & Scope",
        date_range="Apr 23 - May 7, 2025",
        status="Completed",
        deliverables=[
            "Sponsor information gathering",
            "Charter updates",
            "Client scope requirements",
            "Draft scope document",
            "Status reports",
            "Team retrospective",
        ],
    ),
    SprintDraft(
        name="Sprint 3",
        subtitle="Project Planning & Tasks",
        date_range="May 8 - May 21, 2025",
        status="Planned",
        deliverables=[
            "Detailed project planning",
            "Task assignments",
            "Technical requirements",
            "Stakeholder communication plan",
        ],
    ),
    SprintDraft(
        name="Sprint 4",
        subtitle="Design & Development",
        date_range="May 22 - Jun 4, 2025",
        status="Planned",
        deliverables=["Website mockups", "Branding guidelines", "Content development", "Initial prototype"],
    ),
    SprintDraft(
        name="Sprint 5",
        subtitle="Implementation & Testing",
        date_range="Jun 5 - Jun 18, 2025",
        status="Planned",
        deliverables=[
            "Core functionality implementation",
            "Content integration",
            "User testing",
            "Optimization",
        ],
    ),
    SprintDraft(
        name="Sprint 6",
        subtitle="Final Delivery & Presentation",
        date_range="Jun 19 - Jun 27, 2025",
        status="Planned",
        deliverables=[
            "Final testing",
            "Client deliverable preparation",
            "Documentation completion",
            "Capstone presentation",
        ],
    ),
]

DEFAULT_QUICK_NAV_ITEMS: list[QuickNavItemDraft] = [
    QuickNavItemDraft(name="Team", icon="users", link="/team"),
    QuickNavItemDraft(name="Sprints", icon="zap", link="/project-sprints"),
    QuickNavItemDraft(name="Retrospective", icon="lightbulb", link="/retrospective"),
    QuickNavItemDraft(name="Client Project", icon="briefcase", link="/clients-project"),
]


def load_defaults(store: MemStore, *, admin_username: str = "admin", admin_password: str = "admin123") -> None:
    """Populate *store* with the default records."""
    store.users.create(UserDraft(username=admin_username, password=admin_password))
    for page in DEFAULT_PAGES:
        store.pages.create(page)
    for member in DEFAULT_TEAM_MEMBERS:
        store.team_members.create(member)
    for sprint in DEFAULT_SPRINTS:
        store.sprints.create(sprint)
    for item in DEFAULT_QUICK_NAV_ITEMS:
        store.quick_nav_items.create(item)
    logger.info("store.seeded", **store.counts())
