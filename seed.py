from feedapi.database import SessionLocal, init_db
from feedapi.models import Post
from feedapi.repositories import PostRepository

# Create tables
init_db()

db = SessionLocal()

# Clear existing data
db.query(Post).delete()
db.commit()

posts = [
    Post(
        author="alice",
        content="hello world",
    ),
    Post(
        author="bob",
        content="Sunset over the harbour tonight.",
        image_url="https://images.example.com/harbour.jpg",
    ),
    Post(
        author="carol",
        content="Reading list for the weekend: three novels and a cookbook.",
    ),
]

repository = PostRepository(db)
for post in posts:
    repository.save(post)

db.close()

print("Database seeded successfully!")
print(f"  - {len(posts)} posts")
