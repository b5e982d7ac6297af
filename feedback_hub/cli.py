import click
from flask.cli import with_appcontext
from feedback_hub.extensions import db
from feedback_hub.services.feedback_store import FeedbackStore
from feedback_hub.utils.enums import FeedbackCategory

SAMPLE_FEEDBACK = [
    "The new open office layout makes it hard to focus during the afternoon.",
    "Weekly one-on-ones with my manager have been genuinely helpful.",
    "I would like a clearer path towards a senior role on the team.",
    "The coffee machine on the third floor has been broken for two weeks.",
    "Leadership could share the quarterly roadmap earlier with the teams.",
    "Access to conference tickets and courses would help me keep learning.",
]


@click.command("init-db")
@with_appcontext
def init_db_command():
    """Create database tables (non-destructive)."""
    db.create_all()
    click.echo("Database tables created")


@click.command("seed-feedback")
@click.option("--count", default=10, show_default=True, type=click.IntRange(min=1), help="Records to insert.")
@with_appcontext
def seed_feedback_command(count):
    """Insert sample feedback records, cycling through every category."""
    db.create_all()
    store = FeedbackStore(db.session)
    categories = list(FeedbackCategory)
    for i in range(count):
        store.insert({
            "feedback": SAMPLE_FEEDBACK[i % len(SAMPLE_FEEDBACK)],
            "category": categories[i % len(categories)].value,
        })
    click.echo(f"Seeded {count} feedback records")


def register_commands(app):
    app.cli.add_command(init_db_command)
    app.cli.add_command(seed_feedback_command)
