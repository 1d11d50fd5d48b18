# SurrealDB HTTP Examples

# Select a part of the code and execute it as a cell (Jupyter notebook like).
# Use the comments as cell definitions.

# Load requirements

import logging
import os

from dotenv import load_dotenv

from surreal_http import RequestError, RootAuth, SigninVars, SurrealDB, TokenAuth

logging.basicConfig(level=logging.DEBUG)

# Load environment from .env (copy and rename .env.example if needed)
load_dotenv()

SURREALDB_URL = os.getenv("SURREALDB_URL", "http://localhost:8000")
SURREALDB_USER = os.getenv("SURREALDB_USER", "root")
SURREALDB_PASS = os.getenv("SURREALDB_PASS", "root")
SURREALDB_NAMESPACE = os.getenv("SURREALDB_NAMESPACE", "test")
SURREALDB_DATABASE = os.getenv("SURREALDB_DATABASE", "test")
SURREALDB_VERSION = os.getenv("SURREALDB_VERSION", ">= 2.x")

db = SurrealDB.http(SURREALDB_URL, SURREALDB_NAMESPACE, SURREALDB_DATABASE, version=SURREALDB_VERSION)

# Root credentials on every request

db.authenticate(RootAuth(SURREALDB_USER, SURREALDB_PASS))
print(db.query("RETURN 1 + 1;"))

# Sign in once and reuse the token

token = db.signin(SigninVars(user=SURREALDB_USER, password=SURREALDB_PASS))
db.authenticate(TokenAuth(token))

db.query("CREATE person:tobie SET name = 'Tobie', age = 33;")
for result in db.query("SELECT * FROM person WHERE age > $age;", {"age": 18}):
    print(result.status, result.time, result.records)

# Errors carry SurrealDB's error record

db.invalidate()
try:
    db.query("REMOVE TABLE person;")
except RequestError as e:
    print(e.to_dict())

db.close()
