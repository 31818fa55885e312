# Models package - persisted records and session context
from nxthub.models.user import User, Role
from nxthub.models.influencer import Influencer, Platforms
from nxthub.models.campaign import Campaign, CampaignStatus
from nxthub.models.session import SessionContext
from nxthub.models.kv import KeyValueEntry
