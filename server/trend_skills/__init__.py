"""
Trend Skills

Scheduled skills that query news/search APIs, rank trending keyword
phrases and ticker-like tokens, and post summaries to Discord.

Architecture:
    Brave / Polygon (external) -> clients (normalize) -> trends (dedupe, extract, rank)
        -> formatting -> clients.discord

Components:
    - clients: Brave Search, Polygon news and Discord HTTP clients
    - trends: title dedupe, phrase/ticker extraction, ranking
    - news_crawler: category query orchestrator
    - money_maker: opportunity idea finder
    - formatting: Discord message templates
    - scheduled: timer-driven job handlers and the cron table
"""
