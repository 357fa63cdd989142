from dotenv import load_dotenv
import os

load_dotenv()

class Config:
    TWITTER_API_BASE_URL = os.getenv('TWITTER_API_BASE_URL', 'https://api.twitter.com/1.1')
    TWITTER_TIMEOUT = float(os.getenv('TWITTER_TIMEOUT', '30'))

    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')
