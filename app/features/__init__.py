"""
Features Module - Self-contained feature units.

Each feature is a modular unit with its own logic:
- database: Supabase repositories for users, entries, prompts, insights
- enrichment: Claude sentiment/theme/prompt/insight oracle and its fallback policy
- analytics: Streaks, mood trends, theme frequencies
- journaling: Entry, prompt and insight orchestration
- identity: Bearer-token verification
"""
