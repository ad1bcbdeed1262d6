"""
Curation Life Culture API

This server provides endpoints for:
- Fetching exhibitions and performances from the KOPIS registry
- Searching pop-up stores across Naver and Kakao
- Merging the Seoul open-data culture feed into one listing
- Rendering the listings in a gallery page

Target: Korean cultural events (Seoul first, nationwide registry)
Focus: Exhibitions, performances, pop-up stores
"""

__version__ = "0.3.0"
