import os
from dotenv import load_dotenv

# Load environment variables
load_dotenv()


class Settings:
    """Application settings and configuration"""

    def __init__(self):
        self.elasticsearch_url = os.getenv("ELASTICSEARCH_URL", "http://localhost:9200")
        self.elasticsearch_username = os.getenv("ELASTICSEARCH_USERNAME")
        self.elasticsearch_password = os.getenv("ELASTICSEARCH_PASSWORD")
        self.elasticsearch_timeout = float(os.getenv("ELASTICSEARCH_TIMEOUT", 10))

        # Content index written by the content repository indexer
        self.elasticsearch_index = os.getenv("ELASTICSEARCH_INDEX", "neoscr")

        # API settings
        self.api_title = "Site Search Suggestion API"
        self.api_description = "Autocomplete and suggestion queries scoped to a node of the content tree"
        self.api_version = "1.0.0"

        self.log_level = os.getenv("LOG_LEVEL", "INFO").upper()

        # Suggestion settings
        self.suggest_workspace = os.getenv("SUGGEST_WORKSPACE", "live")
        self.completion_field = os.getenv("SUGGEST_COMPLETION_FIELD", "__completion")
        self.suggestion_field = os.getenv("SUGGEST_SUGGESTION_FIELD", "__suggestions")
        self.completion_size = int(os.getenv("SUGGEST_COMPLETION_SIZE", 10))

    @property
    def elasticsearch_auth(self):
        """Get Elasticsearch authentication tuple"""
        if self.elasticsearch_username and self.elasticsearch_password:
            return (self.elasticsearch_username, self.elasticsearch_password)
        return None


# Global settings instance
settings = Settings()
