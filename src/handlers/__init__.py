"""
Lambda Handlers for Movie Crew API

サーバレス構成のエントリポイント:
- Crew Lookup (GET /movies/{movieId}/crew/{role})
"""
