"""Built-in landing content served when the database is unavailable.

Rows mirror the ``to_dict`` output of the landing models so clients see the
same keys whichever source answered. ``seed-landing`` loads the same rows.
"""
import copy

MOCK_TESTIMONIALS = [
    {
        "id": "testimonial-1",
        "user_id": None,
        "name": "Sarah Johnson",
        "title": "Freelance Developer",
        "quote": "Eloity transformed how I manage my freelance work. The platform is intuitive and the payment processing is seamless.",
        "image_url": "https://randomuser.me/api/portraits/women/32.jpg",
        "metrics": {"earnings": 50000, "projects": 120},
        "category": "freelancer",
        "rating": 5,
        "is_verified": True,
        "is_featured": True,
        "order": 1,
    },
    {
        "id": "testimonial-2",
        "user_id": None,
        "name": "Ahmed Hassan",
        "title": "Content Creator",
        "quote": "The creator economy tools on Eloity helped me monetize my content effectively. I doubled my income in 6 months.",
        "image_url": "https://randomuser.me/api/portraits/men/44.jpg",
        "metrics": {"followers": 500000, "monthly_earnings": 25000},
        "category": "creator",
        "rating": 5,
        "is_verified": True,
        "is_featured": True,
        "order": 2,
    },
]

MOCK_FAQS = [
    {
        "id": "faq-1",
        "question": "How do I get started on Eloity?",
        "answer": "Create an account, complete your profile, and start exploring opportunities in your field. It takes just a few minutes to get up and running.",
        "category": "getting-started",
        "is_active": True,
        "order": 1,
    },
    {
        "id": "faq-2",
        "question": "Is Eloity available in my country?",
        "answer": "Eloity is available in 150+ countries. We support multiple currencies and payment methods to serve a global audience.",
        "category": "platform",
        "is_active": True,
        "order": 2,
    },
    {
        "id": "faq-3",
        "question": "How are payments processed?",
        "answer": "We use secure payment processors to handle transactions. Payments are typically processed within 24-48 hours to your preferred wallet or bank account.",
        "category": "payments",
        "is_active": True,
        "order": 3,
    },
]

MOCK_USE_CASES = [
    {
        "id": "usecase-1",
        "user_type": "freelancer",
        "title": "Build Your Freelance Career",
        "description": "Connect with clients worldwide and grow your freelance business with Eloity's comprehensive tools and marketplace.",
        "avatar_url": "https://randomuser.me/api/portraits/women/45.jpg",
        "results": {"clients": "1000+", "earnings": "$100K+", "projects": "500+"},
        "timeline_weeks": 24,
        "image_url": "https://images.unsplash.com/photo-1552664730-d307ca884978?w=500&h=300&fit=crop",
        "is_featured": True,
        "order": 1,
    },
    {
        "id": "usecase-2",
        "user_type": "creator",
        "title": "Monetize Your Content",
        "description": "Turn your passion into income with Eloity's creator tools, sponsorships, and community monetization features.",
        "avatar_url": "https://randomuser.me/api/portraits/men/46.jpg",
        "results": {"monthly_earnings": "$10K+", "followers": "100K+"},
        "timeline_weeks": 12,
        "image_url": "https://images.unsplash.com/photo-1516321318423-f06f70504504?w=500&h=300&fit=crop",
        "is_featured": True,
        "order": 2,
    },
]

MOCK_STATS = [
    {
        "id": "stat-1",
        "metric_name": "Active Users",
        "current_value": "500000",
        "unit": "users",
        "display_format": "compact",
        "label": "Global users on Eloity platform",
        "icon": "Users",
        "order": 1,
    },
    {
        "id": "stat-2",
        "metric_name": "Total Transactions",
        "current_value": "100000000",
        "unit": "USD",
        "display_format": "currency",
        "label": "Total value processed on platform",
        "icon": "DollarSign",
        "order": 2,
    },
    {
        "id": "stat-3",
        "metric_name": "Supported Countries",
        "current_value": "150",
        "unit": "countries",
        "display_format": "number",
        "label": "Countries with Eloity presence",
        "icon": "Globe",
        "order": 3,
    },
]

MOCK_COMPARISONS = [
    {
        "id": "comparison-1",
        "feature_name": "Multi-currency Support",
        "category": "payments",
        "eloity_has": True,
        "feature_description": "Support for 150+ currencies with real-time exchange rates",
        "competitors": {"Competitor A": False, "Competitor B": True, "Competitor C": False},
        "order": 1,
        "is_active": True,
    },
    {
        "id": "comparison-2",
        "feature_name": "Creator Monetization",
        "category": "features",
        "eloity_has": True,
        "feature_description": "Multiple revenue streams including tips, sponsorships, and subscriptions",
        "competitors": {"Competitor A": False, "Competitor B": True, "Competitor C": True},
        "order": 2,
        "is_active": True,
    },
    {
        "id": "comparison-3",
        "feature_name": "Global Marketplace",
        "category": "features",
        "eloity_has": True,
        "feature_description": "Decentralized marketplace connecting buyers and sellers worldwide",
        "competitors": {"Competitor A": False, "Competitor B": False, "Competitor C": True},
        "order": 3,
        "is_active": True,
    },
]


def _rows(rows, **match):
    out = []
    for row in rows:
        if all(value is None or row.get(key) == value for key, value in match.items()):
            out.append(copy.deepcopy(row))
    return sorted(out, key=lambda r: r.get("order", 0))


def mock_testimonials(category=None, featured_only=False):
    return _rows(MOCK_TESTIMONIALS, category=category, is_featured=True if featured_only else None)


def mock_faqs(category=None):
    return _rows(MOCK_FAQS, category=category, is_active=True)


def mock_use_cases(user_type=None, featured_only=False):
    return _rows(MOCK_USE_CASES, user_type=user_type, is_featured=True if featured_only else None)


def mock_stats():
    return _rows(MOCK_STATS)


def mock_comparisons(category=None):
    return _rows(MOCK_COMPARISONS, category=category, is_active=True)


def mock_overview():
    return {
        "stats": mock_stats(),
        "testimonials": mock_testimonials(featured_only=True)[:3],
        "useCases": mock_use_cases(featured_only=True)[:2],
    }
