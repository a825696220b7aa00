"""Preset catalog: one standard page template per vertical.

Every catalog preset starts with a Hero and ends with a Footer. Copy that
should follow the user's content uses ``{{...}}`` placeholder tokens.
"""

from __future__ import annotations

from collections.abc import Iterator

from quickpage.models.blocks import (
    FAQBlock,
    FAQItem,
    FAQProps,
    FeatureGridBlock,
    FeatureGridProps,
    FeatureItem,
    FooterBlock,
    FooterLink,
    FooterLinkGroup,
    FooterProps,
    HeroBlock,
    HeroProps,
    LogoRowBlock,
    LogoRowProps,
    Preset,
    PricingBlock,
    PricingPlan,
    PricingProps,
    SplitImageBlock,
    SplitImageProps,
    TestimonialBlock,
    TestimonialItem,
    TestimonialProps,
)
from quickpage.models.vertical import Vertical

# ---------------------------------------------------------------------------
# Block builders
# ---------------------------------------------------------------------------


def _hero() -> HeroBlock:
    return HeroBlock(props=HeroProps(brand_name="{{brandName}}", tagline="{{tagline}}", cta="{{ctas.0}}"))


def _features(title: str, subtitle: str, descriptions: tuple[str, str, str]) -> FeatureGridBlock:
    return FeatureGridBlock(
        props=FeatureGridProps(
            title=title,
            subtitle=subtitle,
            features=[
                FeatureItem(title=f"{{{{features.{idx}}}}}", description=description)
                for idx, description in enumerate(descriptions)
            ],
        )
    )


def _faq(title: str = "Frequently Asked Questions") -> FAQBlock:
    return FAQBlock(
        props=FAQProps(
            title=title,
            faqs=[
                FAQItem(question=f"{{{{faq.{idx}.q}}}}", answer=f"{{{{faq.{idx}.a}}}}")
                for idx in range(3)
            ],
        )
    )


def _testimonials(title: str, *items: tuple[str, str, str, str | None]) -> TestimonialBlock:
    return TestimonialBlock(
        props=TestimonialProps(
            title=title,
            testimonials=[
                TestimonialItem(quote=quote, author=author, role=role, company=company)
                for quote, author, role, company in items
            ],
        )
    )


def _pricing(title: str, subtitle: str, *plans: PricingPlan) -> PricingBlock:
    return PricingBlock(props=PricingProps(title=title, subtitle=subtitle, plans=list(plans)))


def _split(title: str, description: str, cta: str, reverse: bool = False) -> SplitImageBlock:
    return SplitImageBlock(
        props=SplitImageProps(title=title, description=description, cta=cta, reverse=reverse)
    )


def _logos(title: str, logos: list[str]) -> LogoRowBlock:
    return LogoRowBlock(props=LogoRowProps(title=title, logos=logos))


def _footer(*groups: tuple[str, list[tuple[str, str]]]) -> FooterBlock:
    return FooterBlock(
        props=FooterProps(
            brand_name="{{brandName}}",
            links=[
                FooterLinkGroup(
                    title=title,
                    items=[FooterLink(label=label, href=href) for label, href in links],
                )
                for title, links in groups
            ],
        )
    )


# ---------------------------------------------------------------------------
# Catalog
# ---------------------------------------------------------------------------

_B2B_SAAS = Preset(
    id="b2b_saas_standard",
    name="Standard SaaS",
    verticals=[Vertical.B2B_SAAS],
    blocks=[
        _hero(),
        _logos("Trusted by leading companies", ["Company 1", "Company 2", "Company 3", "Company 4"]),
        _features(
            "Everything you need to succeed",
            "Powerful features designed for modern teams",
            (
                "Streamline your workflow with our intuitive interface",
                "Scale effortlessly as your business grows",
                "Get insights that drive real results",
            ),
        ),
        _pricing(
            "Simple, transparent pricing",
            "Choose the plan that fits your needs",
            PricingPlan(
                name="Starter",
                price="$29/mo",
                features=["Up to 5 users", "Basic features", "Email support"],
                cta="Start Free Trial",
            ),
            PricingPlan(
                name="Professional",
                price="$99/mo",
                features=["Up to 25 users", "Advanced features", "Priority support"],
                cta="Start Free Trial",
                popular=True,
            ),
            PricingPlan(
                name="Enterprise",
                price="Custom",
                features=["Unlimited users", "All features", "Dedicated support"],
                cta="Contact Sales",
            ),
        ),
        _testimonials(
            "What our customers say",
            ("This tool has transformed how we work. The ROI was immediate.", "Sarah Johnson", "CEO", "TechCorp"),
            ("Finally, a solution that actually works for our team size.", "Mike Chen", "CTO", "StartupXYZ"),
        ),
        _faq(),
        _footer(
            ("Product", [("Features", "#features"), ("Pricing", "#pricing"), ("Integrations", "#integrations")]),
            ("Company", [("About", "#about"), ("Blog", "#blog"), ("Careers", "#careers")]),
            ("Support", [("Help Center", "#help"), ("Contact", "#contact"), ("Status", "#status")]),
        ),
    ],
)

_SINGLE_PRODUCT = Preset(
    id="single_product_standard",
    name="Single Product",
    verticals=[Vertical.SINGLE_PRODUCT],
    blocks=[
        _hero(),
        _features(
            "Why choose {{brandName}}?",
            "The perfect solution for your needs",
            (
                "Experience the difference quality makes",
                "Built to last with premium materials",
                "Designed with your success in mind",
            ),
        ),
        _pricing(
            "Simple pricing",
            "One product, one price",
            PricingPlan(
                name="{{brandName}}",
                price="$99",
                features=["{{features.0}}", "{{features.1}}", "{{features.2}}", "30-day guarantee"],
                cta="Order Now",
                popular=True,
            ),
        ),
        _testimonials(
            "Customer reviews",
            ("This product exceeded all my expectations. Highly recommended!", "Alex Thompson", "Customer", None),
            ("Best purchase I've made this year. Worth every penny.", "Maria Garcia", "Customer", None),
        ),
        _footer(
            ("Product", [("Features", "#features"), ("Specifications", "#specs"), ("Reviews", "#reviews")]),
            ("Support", [("Shipping", "#shipping"), ("Returns", "#returns"), ("Contact", "#contact")]),
        ),
    ],
)

_ECOMMERCE_LITE = Preset(
    id="ecommerce_lite_standard",
    name="E-commerce Lite",
    verticals=[Vertical.ECOMMERCE_LITE],
    blocks=[
        _hero(),
        _features(
            "Why shop with us",
            "Quality products, exceptional service",
            ("Carefully curated selection", "Fast and reliable shipping", "Easy returns and exchanges"),
        ),
        _split(
            "Featured Products",
            "Discover our most popular items, handpicked for quality and style.",
            "Shop Now",
        ),
        _pricing(
            "Simple pricing",
            "No hidden fees, no surprises",
            PricingPlan(
                name="Free Shipping",
                price="On orders over $50",
                features=["Free standard shipping", "No minimum order", "Track your package"],
                cta="Shop Now",
                popular=True,
            ),
            PricingPlan(
                name="Express Delivery",
                price="$9.99",
                features=["Next-day delivery", "Priority support", "Free returns"],
                cta="Upgrade",
            ),
        ),
        _testimonials(
            "Customer reviews",
            (
                "Great products and even better customer service. Will definitely order again!",
                "Jessica Taylor",
                "Customer",
                None,
            ),
            ("Fast shipping and exactly as described. Highly recommend!", "Michael Johnson", "Customer", None),
        ),
        _footer(
            ("Shop", [("All Products", "#products"), ("Categories", "#categories"), ("Sale", "#sale")]),
            ("Customer Service", [("Shipping Info", "#shipping"), ("Returns", "#returns"), ("Contact", "#contact")]),
        ),
    ],
)

_LOCAL_SERVICE = Preset(
    id="local_service_standard",
    name="Local Service",
    verticals=[Vertical.LOCAL_SERVICE],
    blocks=[
        _hero(),
        _features(
            "Our services",
            "Professional {{brandName}} in your area",
            (
                "Expert service with local knowledge",
                "Flexible scheduling to fit your needs",
                "Satisfaction guaranteed or your money back",
            ),
        ),
        _testimonials(
            "What our customers say",
            (
                "Professional, reliable, and reasonably priced. Will definitely use again.",
                "John Smith",
                "Homeowner",
                None,
            ),
            ("They showed up on time and did excellent work. Highly recommend!", "Lisa Brown", "Business Owner", None),
        ),
        _faq("Common Questions"),
        _footer(
            ("Services", [("What We Do", "#services"), ("Areas We Serve", "#areas"), ("Get Quote", "#quote")]),
            ("Contact", [("Phone", "tel:+1234567890"), ("Email", "mailto:info@example.com"), ("Address", "#address")]),
        ),
    ],
)

_COURSE = Preset(
    id="course_standard",
    name="Online Course",
    verticals=[Vertical.COURSE],
    blocks=[
        _hero(),
        _features(
            "What you'll learn",
            "Comprehensive curriculum designed for success",
            (
                "Master the fundamentals with expert guidance",
                "Hands-on projects and real-world applications",
                "Lifetime access to all materials and updates",
            ),
        ),
        _pricing(
            "Choose your learning path",
            "Flexible options for every budget",
            PricingPlan(
                name="Self-Paced",
                price="$97",
                features=["Lifetime access", "All video lessons", "Downloadable resources"],
                cta="Enroll Now",
            ),
            PricingPlan(
                name="With Support",
                price="$197",
                features=["Everything in Self-Paced", "1-on-1 coaching calls", "Private community"],
                cta="Enroll Now",
                popular=True,
            ),
        ),
        _testimonials(
            "Student success stories",
            ("This course changed my career. The instructor is amazing!", "Sarah Martinez", "Student", None),
            (
                "Worth every penny. I learned more in 6 weeks than in 6 months on my own.",
                "Tom Anderson",
                "Student",
                None,
            ),
        ),
        _footer(
            ("Course", [("Curriculum", "#curriculum"), ("Instructor", "#instructor"), ("FAQ", "#faq")]),
            ("Support", [("Help Center", "#help"), ("Contact", "#contact"), ("Refund Policy", "#refunds")]),
        ),
    ],
)

_AGENCY = Preset(
    id="agency_standard",
    name="Creative Agency",
    verticals=[Vertical.AGENCY],
    blocks=[
        _hero(),
        _logos("Trusted by innovative brands", ["Client 1", "Client 2", "Client 3", "Client 4"]),
        _features(
            "Our expertise",
            "Creative solutions that drive results",
            (
                "Strategic thinking meets creative execution",
                "Data-driven insights for better outcomes",
                "End-to-end project management",
            ),
        ),
        _testimonials(
            "Client success stories",
            (
                "They transformed our brand and helped us reach new heights.",
                "Jennifer Lee",
                "Marketing Director",
                "InnovateCorp",
            ),
            (
                "Professional, creative, and results-oriented. Exactly what we needed.",
                "David Wilson",
                "CEO",
                "TechStart",
            ),
        ),
        _footer(
            ("Services", [("Branding", "#branding"), ("Web Design", "#web"), ("Marketing", "#marketing")]),
            ("Work", [("Portfolio", "#portfolio"), ("Case Studies", "#cases"), ("Process", "#process")]),
        ),
    ],
)

_NEWSLETTER = Preset(
    id="newsletter_standard",
    name="Newsletter",
    verticals=[Vertical.NEWSLETTER],
    blocks=[
        _hero(),
        _features(
            "What you'll get",
            "Valuable insights delivered to your inbox",
            (
                "Weekly insights and analysis",
                "Exclusive content not available elsewhere",
                "Join thousands of like-minded readers",
            ),
        ),
        _testimonials(
            "What readers say",
            (
                "This newsletter is my go-to source for industry insights. Highly recommended!",
                "Alex Chen",
                "Reader",
                None,
            ),
            ("Always relevant and well-written. I look forward to every issue.", "Maria Rodriguez", "Reader", None),
        ),
        _footer(
            ("Newsletter", [("Archive", "#archive"), ("Subscribe", "#subscribe"), ("Unsubscribe", "#unsubscribe")]),
            ("About", [("Author", "#author"), ("Mission", "#mission"), ("Contact", "#contact")]),
        ),
    ],
)

_RESTAURANT = Preset(
    id="restaurant_standard",
    name="Restaurant",
    verticals=[Vertical.RESTAURANT],
    blocks=[
        _hero(),
        _features(
            "Our specialties",
            "Fresh ingredients, authentic flavors",
            (
                "Made fresh daily with local ingredients",
                "Family recipes passed down through generations",
                "Warm, welcoming atmosphere for all occasions",
            ),
        ),
        _split(
            "Signature Dishes",
            "Experience our most beloved creations, crafted with passion and the finest ingredients.",
            "View Menu",
            reverse=True,
        ),
        _pricing(
            "Dining options",
            "Choose your perfect dining experience",
            PricingPlan(
                name="Dine In",
                price="Full Service",
                features=["Complete menu", "Table service", "Full bar", "Reservations available"],
                cta="Make Reservation",
                popular=True,
            ),
            PricingPlan(
                name="Takeout",
                price="Quick & Easy",
                features=["Online ordering", "Curbside pickup", "Fast preparation", "Same great taste"],
                cta="Order Now",
            ),
        ),
        _testimonials(
            "What diners say",
            ("The best meal I've had in months. The flavors are incredible!", "Robert Kim", "Diner", None),
            ("Great food, great service, great atmosphere. We'll be back soon!", "Amanda White", "Diner", None),
        ),
        _faq(),
        _footer(
            ("Menu", [("Appetizers", "#appetizers"), ("Main Courses", "#mains"), ("Desserts", "#desserts")]),
            ("Visit Us", [("Hours", "#hours"), ("Location", "#location"), ("Reservations", "#reservations")]),
        ),
    ],
)

_REAL_ESTATE = Preset(
    id="real_estate_standard",
    name="Real Estate",
    verticals=[Vertical.REAL_ESTATE],
    blocks=[
        _hero(),
        _logos("Trusted by leading platforms", ["Zillow", "Realtor.com", "Redfin", "Trulia"]),
        _features(
            "Our services",
            "Expert guidance for your real estate needs",
            (
                "Local market expertise and insights",
                "Personalized service tailored to your goals",
                "Full-service support from start to finish",
            ),
        ),
        _split(
            "Featured Properties",
            "Discover your perfect home with our curated selection of premium properties.",
            "View Listings",
        ),
        _pricing(
            "Service packages",
            "Choose the level of support that fits your needs",
            PricingPlan(
                name="Full Service",
                price="6% Commission",
                features=["Complete marketing", "Professional photos", "Open houses", "Negotiation support"],
                cta="Get Started",
                popular=True,
            ),
            PricingPlan(
                name="Flat Fee",
                price="$2,500",
                features=["MLS listing", "Basic marketing", "Contract support", "No commission"],
                cta="Learn More",
            ),
        ),
        _testimonials(
            "Client testimonials",
            (
                "They helped us find our dream home in record time. Professional and knowledgeable.",
                "Jennifer Davis",
                "Home Buyer",
                None,
            ),
            (
                "Sold our house for more than we expected. Highly recommend their services.",
                "Mark Thompson",
                "Home Seller",
                None,
            ),
        ),
        _footer(
            ("Services", [("Buying", "#buying"), ("Selling", "#selling"), ("Renting", "#renting")]),
            ("Resources", [("Market Reports", "#reports"), ("Home Valuation", "#valuation"), ("Contact", "#contact")]),
        ),
    ],
)

_EVENT = Preset(
    id="event_standard",
    name="Event",
    verticals=[Vertical.EVENT],
    blocks=[
        _hero(),
        _features(
            "Event highlights",
            "An unforgettable experience awaits",
            (
                "World-class speakers and presenters",
                "Networking opportunities with industry leaders",
                "Hands-on workshops and interactive sessions",
            ),
        ),
        _split(
            "Event Venue",
            "Join us at a premier location with state-of-the-art facilities and comfortable seating.",
            "View Venue",
            reverse=True,
        ),
        _pricing(
            "Ticket options",
            "Choose the experience that fits your needs",
            PricingPlan(
                name="General Admission",
                price="$99",
                features=["Full event access", "Lunch included", "Networking reception"],
                cta="Buy Tickets",
            ),
            PricingPlan(
                name="VIP",
                price="$199",
                features=["Everything in General", "VIP seating", "Meet & greet", "Exclusive materials"],
                cta="Buy Tickets",
                popular=True,
            ),
        ),
        _testimonials(
            "What attendees say",
            (
                "One of the best events I've attended. Learned so much and met amazing people.",
                "Sarah Wilson",
                "Attendee",
                None,
            ),
            ("Well organized, great content, and excellent networking opportunities.", "David Lee", "Attendee", None),
        ),
        _faq(),
        _footer(
            ("Event", [("Schedule", "#schedule"), ("Speakers", "#speakers"), ("Venue", "#venue")]),
            ("Tickets", [("Buy Tickets", "#tickets"), ("Group Rates", "#groups"), ("Refund Policy", "#refunds")]),
        ),
    ],
)

PRESETS: dict[Vertical, tuple[Preset, ...]] = {
    Vertical.B2B_SAAS: (_B2B_SAAS,),
    Vertical.SINGLE_PRODUCT: (_SINGLE_PRODUCT,),
    Vertical.ECOMMERCE_LITE: (_ECOMMERCE_LITE,),
    Vertical.LOCAL_SERVICE: (_LOCAL_SERVICE,),
    Vertical.COURSE: (_COURSE,),
    Vertical.AGENCY: (_AGENCY,),
    Vertical.NEWSLETTER: (_NEWSLETTER,),
    Vertical.RESTAURANT: (_RESTAURANT,),
    Vertical.REAL_ESTATE: (_REAL_ESTATE,),
    Vertical.EVENT: (_EVENT,),
}


def lookup(vertical: Vertical | str) -> list[Preset]:
    """Presets for *vertical*, default first. Empty when there are none."""
    return list(PRESETS.get(Vertical(vertical), ()))


def get_preset(vertical: Vertical | str, preset_id: str | None = None) -> Preset | None:
    """Preset by id within the vertical, else the vertical's default, else None."""
    presets = lookup(vertical)
    if preset_id is not None:
        for preset in presets:
            if preset.id == preset_id:
                return preset
    return presets[0] if presets else None


def find_preset(preset_id: str) -> Preset | None:
    """Search the whole catalog for *preset_id*."""
    for preset in all_presets():
        if preset.id == preset_id:
            return preset
    return None


def all_presets() -> Iterator[Preset]:
    for presets in PRESETS.values():
        yield from presets
