from invoke import task
from pathlib import Path

# Get project root directory
PROJECT_ROOT = Path(__file__).parent.absolute()

# Note: .env file is automatically loaded by Django settings
# No need to load it here to avoid duplication


def project_relative(path):
    """Convert a relative path to an absolute path relative to the project root."""
    return str(PROJECT_ROOT / path)


def manage(c, command, settings=None):
    """Run a manage.py command, optionally against another settings module."""
    manage_py = project_relative("manage.py")
    if settings:
        command = f"{command} --settings={settings}"
    c.run(f"python {manage_py} {command}")


@task
def update(c):
    """Update all dependencies to their latest versions using poetry."""
    c.run("poetry update")


@task
def up(c):
    """Alias for update - update all dependencies to their latest versions."""
    update(c)


@task
def migrate(c):
    """Run Django database migrations."""
    manage(c, "migrate")


@task
def makemigrations(c):
    """Create new Django migrations."""
    manage(c, "makemigrations")


@task
def shell(c):
    """Start Django shell."""
    manage(c, "shell")


@task
def test(c, path=None):
    """Run Django tests. Optionally specify a specific test path."""
    if path:
        manage(c, f"test {path}", settings="matchday.test_settings")
    else:
        manage(c, "test", settings="matchday.test_settings")


@task
def seed(c, tournaments=2, players=12, matches=20, random_seed=None):
    """Seed the database with players, point systems and scored matches."""
    command = (
        f"seed_database --tournaments={tournaments} "
        f"--players={players} --matches={matches}"
    )
    if random_seed is not None:
        command += f" --seed={random_seed}"
    manage(c, command)


@task
def recalc(c, tournament=None):
    """Rebuild statistics for one tournament, or all of them."""
    if tournament:
        manage(c, f"recalculate_stats {tournament}")
    else:
        manage(c, "recalculate_stats --all")
