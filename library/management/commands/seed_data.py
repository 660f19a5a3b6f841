user_fixtures = [
    {"username": "User1", "password": "Password1", "role": "ROLE_USER", "email": "user1@example.org"},
    {"username": "User2", "password": "Password2", "role": "ROLE_ADMIN", "email": "user2@example.org"},
]

book_fixtures = [
    {"title": "Ulysses", "author": "James Joyce", "genre": "Modernist novel"},
    {"title": "Dubliners", "author": "James Joyce", "genre": "Short stories"},
    {"title": "War and Peace", "author": "Leo Tolstoy", "genre": "Historical novel"},
    {"title": "The Master and Margarita", "author": "Mikhail Bulgakov", "genre": "Fantasy"},
]

comment_fixtures = [
    {"content": "Published in 1922", "book": "Ulysses"},
    {"content": "Set over a single day in Dublin", "book": "Ulysses"},
]

genre_pool = [
    "Adventure",
    "Detective",
    "Drama",
    "Poetry",
    "Science fiction",
    "Satire",
]
