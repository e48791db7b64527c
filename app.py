from profile_analytics.ui import run_app

run_app()
