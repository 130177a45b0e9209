"""CRM search service: ranked search over people, companies and projects, plus saved research."""
