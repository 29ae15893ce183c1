"""Seed dataset for the in-memory catalogue."""

from schemas import Article, Author, FAQItem, Issue, Journal, LogEntry, User

JOURNALS: tuple[Journal, ...] = (
    Journal(
        id="j1",
        title="Journal of Advanced Artificial Intelligence",
        description="A leading peer-reviewed journal covering machine learning, neural networks, and cognitive computing.",
        issn="2045-1234",
        field="Computer Science",
        publisher="TechScience Press",
        cover_image="https://picsum.photos/400/600?random=1",
        contact_email="editor@jaai.org",
    ),
    Journal(
        id="j2",
        title="Modern Medical Research",
        description="Clinical studies, reviews, and updates in general medicine and specialized healthcare fields.",
        issn="1098-7654",
        field="Medicine",
        publisher="HealthCorp Global",
        cover_image="https://picsum.photos/400/600?random=2",
        contact_email="submit@modmed.com",
    ),
    Journal(
        id="j3",
        title="Quantum Physics Review",
        description="Exploring the fundamental nature of reality through quantum mechanics and theoretical physics.",
        issn="5544-3322",
        field="Physics",
        publisher="Universe Publishing",
        cover_image="https://picsum.photos/400/600?random=3",
        contact_email="quantum@physicsreview.net",
    ),
    Journal(
        id="j4",
        title="Global Economics Quarterly",
        description="Analysis of global market trends, macroeconomics, and fiscal policy.",
        issn="9988-7766",
        field="Economics",
        publisher="EconWorld",
        cover_image="https://picsum.photos/400/600?random=4",
        contact_email="info@geq.org",
    ),
)

ISSUES: tuple[Issue, ...] = (
    Issue(id="i1", volume=12, number=1, year=2024, journal_id="j1",
          cover_image="https://picsum.photos/300/400?random=10"),
    Issue(id="i2", volume=11, number=4, year=2023, journal_id="j1",
          cover_image="https://picsum.photos/300/400?random=11"),
    Issue(id="i3", volume=45, number=2, year=2024, journal_id="j2",
          cover_image="https://picsum.photos/300/400?random=12"),
)

ARTICLES: tuple[Article, ...] = (
    Article(
        id="a1",
        title="Transformer Architectures in Low-Resource Languages",
        authors=[
            Author(id="au1", name="Dr. Jane Smith", affiliation="MIT"),
            Author(id="au2", name="John Doe", affiliation="Stanford"),
        ],
        abstract=(
            "This paper explores the efficacy of transformer models when applied to "
            "languages with limited training datasets. We propose a new transfer "
            "learning technique that improves accuracy by 15%."
        ),
        publish_date="2024-03-15",
        keywords=["NLP", "Transformers", "AI"],
        page_range="12-24",
        issue_id="i1",
        journal_id="j1",
        status="published",
    ),
    Article(
        id="a2",
        title="Ethical Implications of AGI",
        authors=[Author(id="au3", name="Sarah Connor", affiliation="Tech Ethics Board")],
        abstract=(
            "As we approach Artificial General Intelligence, the alignment problem "
            "becomes critical. This article surveys current alignment strategies and "
            "proposes a multi-layered safety framework."
        ),
        publish_date="2024-03-20",
        keywords=["AGI", "Ethics", "Safety"],
        page_range="25-34",
        issue_id="i1",
        journal_id="j1",
        status="published",
    ),
    Article(
        id="a3",
        title="CRISPR Advances in 2023",
        authors=[Author(id="au4", name="Dr. House", affiliation="Princeton Plainsboro")],
        abstract=(
            "A review of the major breakthroughs in gene editing utilizing CRISPR-Cas9 "
            "technologies over the past year, focusing on therapeutic applications for "
            "hereditary diseases."
        ),
        publish_date="2024-02-10",
        keywords=["Genetics", "CRISPR", "Medicine"],
        page_range="100-115",
        issue_id="i3",
        journal_id="j2",
        status="published",
    ),
)

USERS: tuple[User, ...] = (
    User(id="u1", name="System Admin", email="admin@scholarflow.com", role="admin",
         affiliation="ScholarFlow HQ",
         avatar="https://ui-avatars.com/api/?name=System+Admin&background=0D8ABC&color=fff"),
    User(id="u2", name="Dr. Jane Smith", email="jane@mit.edu", role="author",
         affiliation="MIT",
         avatar="https://ui-avatars.com/api/?name=Jane+Smith&background=random"),
    User(id="u3", name="Editor John", email="john@journal.org", role="editor",
         affiliation="Science Press",
         avatar="https://ui-avatars.com/api/?name=Editor+John&background=random"),
    User(id="u4", name="Guest User", email="guest@example.com", role="guest",
         affiliation="Independent",
         avatar="https://ui-avatars.com/api/?name=Guest+User&background=random"),
)

LOGS: tuple[LogEntry, ...] = (
    LogEntry(id="l1", user_id="u1", user_name="System Admin", action="Create Journal",
             details='Created "Journal of AI"', timestamp="2024-03-25 10:30 AM"),
    LogEntry(id="l2", user_id="u2", user_name="Dr. Jane Smith", action="Submit Article",
             details='Submitted "Transformers..."', timestamp="2024-03-24 14:15 PM"),
    LogEntry(id="l3", user_id="u3", user_name="Editor John", action="Update Issue",
             details="Updated Vol 12, Issue 1", timestamp="2024-03-23 09:00 AM"),
    LogEntry(id="l4", user_id="u1", user_name="System Admin", action="Delete User",
             details='Deleted user "SpamBot"', timestamp="2024-03-22 16:45 PM"),
)

FAQS: tuple[FAQItem, ...] = (
    FAQItem(id="f1", category="general", question="How do I subscribe to a journal?",
            answer=('You can subscribe by navigating to the journal page and clicking the '
                    '"Subscribe" button. Some journals are open access and do not require '
                    'subscription.')),
    FAQItem(id="f2", category="author", question="How do I submit an article?",
            answer=('Register as an author, navigate to the target journal, and click '
                    '"Submit Manuscript". You will need to upload a PDF and provide metadata.')),
    FAQItem(id="f3", category="editor", question="How do I review submissions?",
            answer=('Log in to your dashboard. Pending submissions will appear in your '
                    '"My Profile" page under "Managed Journals".')),
    FAQItem(id="f4", category="general", question="Is the review process double-blind?",
            answer=("Yes, most of our journals follow a double-blind peer review process to "
                    "ensure impartiality.")),
)
