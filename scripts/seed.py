"""Database seeder: recreates the schema and fills it through the service layer."""
import argparse
import asyncio
import random
import time

from blog_api.database import Base, async_session, engine
from blog_api.models import Post, User
from blog_api.services import post_service, user_service

TOPICS = ["python", "fastapi", "postgresql", "docker", "testing", "performance",
          "security", "asyncio", "sqlalchemy", "pydantic"]


async def seed(small: bool = False):
    num_users = 5 if small else 50
    num_posts = 20 if small else 2000

    print(f"Seeding: {num_users} users, {num_posts} posts")
    start = time.perf_counter()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)

    async with async_session() as session:
        users = []
        for i in range(num_users):
            user = await user_service.create_user(
                session,
                User(
                    username=f"user_{i:04d}",
                    email=f"user_{i:04d}@example.com",
                    password=f"password-{i:04d}",
                ),
            )
            users.append(user)
        print(f"  Created {len(users)} users (password: password-<nnnn>)")

        for i in range(num_posts):
            topic = random.choice(TOPICS)
            await post_service.create_post(
                session,
                Post(
                    title=f"Post {i}: notes on {topic}",
                    content=f"Some thoughts about {topic}. " * 10,
                ),
                random.choice(users).id,
            )
        print(f"  Created {num_posts} posts")

        await session.commit()

    elapsed = time.perf_counter() - start
    print(f"\nSeeding complete in {elapsed:.1f}s")


def main():
    parser = argparse.ArgumentParser(description="Seed the blog database")
    parser.add_argument("--small", action="store_true", help="Use small dataset (20 posts)")
    args = parser.parse_args()
    asyncio.run(seed(small=args.small))


if __name__ == "__main__":
    main()
