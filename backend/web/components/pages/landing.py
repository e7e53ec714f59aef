"""
Marketing landing page: hero, features, how-it-works and call to action.

Every call to action leads to the role-selection screen; the session guard
sends anonymous visitors to /auth first.
"""

from ..base import Component

FEATURES = (
    ("Location-Based Matching", "Find tutors nearby with our advanced geo-location technology. Connect with educators in your area effortlessly."),
    ("Verified Profiles", "All tutors are carefully vetted. Browse detailed profiles with qualifications, experience, and reviews."),
    ("Ratings & Reviews", "Make informed decisions with our transparent rating system. See what other students say about tutors."),
    ("All Subjects Covered", "From math to music, coding to chemistry. Find expert tutors for any subject you need help with."),
    ("Flexible Scheduling", "Book sessions that fit your schedule. Choose from in-person or online tutoring options."),
    ("Safe & Secure", "Your privacy and safety are our priority. All communications are secure and monitored."),
)

STEPS = (
    ("Create Your Profile", "Sign up as a student or tutor. Share your needs or expertise to get matched perfectly."),
    ("Find Your Match", "Browse profiles based on location, subject, and availability. Connect with the perfect fit."),
    ("Start Learning", "Book your first session and begin your learning journey. Rate your experience after."),
)


class LandingPage(Component):
    def render(self) -> str:
        features = "".join(
            f'<article class="card feature-card"><h3>{self.escape(t)}</h3><p class="text-muted">{self.escape(d)}</p></article>'
            for t, d in FEATURES
        )
        steps = "".join(
            f'<li class="step"><span class="step-number" aria-hidden="true">{n}</span>'
            f"<h3>{self.escape(t)}</h3><p class=\"text-muted\">{self.escape(d)}</p></li>"
            for n, (t, d) in enumerate(STEPS, start=1)
        )
        return f"""
        <section class="hero" aria-labelledby="hero-heading">
            <p class="hero-tagline">Connect &bull; Learn &bull; Grow</p>
            <h1 id="hero-heading">Find the Perfect Tutor <span class="accent">Near You</span></h1>
            <p class="lead">Connect with qualified tutors in your area. Location-based matching made simple for students and educators.</p>
            <div class="hero-actions">
                <a class="btn btn-primary" href="/role-select" data-testid="cta-get-started">Get Started</a>
                <a class="btn btn-outline" href="#features">Learn More</a>
            </div>
        </section>
        <section id="features" class="features" aria-labelledby="features-heading">
            <h2 id="features-heading">Why Choose TutorConnect?</h2>
            <p class="text-muted">Everything you need for successful tutoring connections</p>
            <div class="feature-grid">{features}</div>
        </section>
        <section class="how-it-works" aria-labelledby="steps-heading">
            <h2 id="steps-heading">How It Works</h2>
            <p class="text-muted">Get started in three simple steps</p>
            <ol class="steps">{steps}</ol>
            <a class="btn btn-primary" href="/role-select">Start Connecting Now</a>
        </section>
        <section class="cta" aria-labelledby="cta-heading">
            <h2 id="cta-heading">Ready to Start Your Learning Journey?</h2>
            <p class="text-muted">Join thousands of students and tutors already connected through our platform</p>
            <a class="btn btn-primary" href="/role-select">Join TutorConnect</a>
        </section>
        """
