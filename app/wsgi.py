from app.contactviewer import create_app

app = create_app()
