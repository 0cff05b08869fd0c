"""Request and response models of the Discourse API, plus the shared value types."""

from discourse_api.types.base import (
    DiscourseEnum,
    DiscourseModel,
    QueryParams,
)
from discourse_api.types.base64 import (
    Base64Data,
)
from discourse_api.types.phone_number import (
    PhoneNumber,
)
from discourse_api.types.multipart import (
    Attachment,
)
from discourse_api.types.paginate import (
    Pagination,
)
from discourse_api.types.enums import (
    AdminListFlagOrder,
    AdminListOrder,
    Asc,
    Enabled,
    EventStatus,
    Flag,
    IncludeDetails,
    IncludeSubcategories,
    LatestOrder,
    ListPublicOrder,
    ListPublicPeriod,
    NotificationLevel,
    Order,
    Period,
    Type,
    UpdateAvatarRequestBodyType,
    UpdateTopicStatusRequestBodyStatus,
    UploadType,
)
from discourse_api.types.common import (
    ActionSummary,
    BasicUser,
    Post,
    Poster,
    PrimaryGroup,
    TopicList,
    TopicListItem,
)
from discourse_api.types.backups import (
    CreateBackupRequestBody,
    CreateBackupResponse,
    GetBackupsResponse,
)
from discourse_api.types.badges import (
    AdminBadges,
    AdminListBadgesResponse,
    Badge,
    BadgeGrouping,
    BadgeType,
    CreateBadgeRequestBody,
    CreateBadgeResponse,
    GrantedBy,
    ListUserBadgesResponse,
    UpdateBadgeRequestBody,
    UpdateBadgeResponse,
    UserBadge,
)
from discourse_api.types.calendar_events import (
    Event,
    EventPost,
    EventStats,
    EventTopic,
    ListEventsResponse,
)
from discourse_api.types.categories import (
    Category,
    CategoryList,
    CategoryLocalizations,
    CreateCategoryRequestBody,
    CreateCategoryResponse,
    GetCategoryResponse,
    ListCategoriesResponse,
    ListCategoryTopicsResponse,
    Permissions,
    UpdateCategoryRequestBody,
    UpdateCategoryResponse,
)
from discourse_api.types.groups import (
    AddGroupMembersRequestBody,
    AddGroupMembersResponse,
    BasicGroup,
    CreateGroupRequestBody,
    CreateGroupResponse,
    DeleteGroupResponse,
    GetGroupByIdResponse,
    GetGroupResponse,
    Group,
    GroupDetail,
    GroupExtras,
    GroupMember,
    ListGroupMembersMeta,
    ListGroupMembersResponse,
    ListGroupsExtras,
    ListGroupsResponse,
    RemoveGroupMembersRequestBody,
    RemoveGroupMembersResponse,
    UpdateGroupRequestBody,
    UpdateGroupResponse,
)
from discourse_api.types.invites import (
    CreateInviteRequestBody,
    CreateInviteResponse,
    CreateMultipleInvitesRequestBody,
    CreateMultipleInvitesResponse,
    SuccessfulInvitation,
)
from discourse_api.types.notifications import (
    GetNotificationsResponse,
    MarkNotificationsAsReadRequestBody,
    MarkNotificationsAsReadResponse,
    Notification,
    NotificationData,
)
from discourse_api.types.posts import (
    CreateTopicPostPMRequestBody,
    CreateTopicPostPMResponse,
    DeletePostRequestBody,
    GetPostResponse,
    LatestPost,
    ListPostsResponse,
    LockPostRequestBody,
    LockPostResponse,
    PerformPostActionRequestBody,
    PerformPostActionResponse,
    PostRepliesResponse,
    ReplyToUser,
    UpdatePostRequestBody,
    UpdatePostRequestBodyPost,
    UpdatePostResponse,
)
from discourse_api.types.private_messages import (
    GetUserSentPrivateMessagesResponse,
    ListUserPrivateMessagesResponse,
)
from discourse_api.types.search import (
    GroupedSearchResult,
    SearchPost,
    SearchResponse,
    SearchTopic,
)
from discourse_api.types.site import (
    Archetype,
    GetSiteBasicInfoResponse,
    GetSiteResponse,
    PostActionType,
    SiteCategory,
    SiteGroup,
    TrustLevels,
    UserColorScheme,
    UserTheme,
)
from discourse_api.types.tags import (
    CreateTagGroupRequestBody,
    CreateTagGroupResponse,
    GetTagGroupResponse,
    GetTagResponse,
    ListTagGroupsResponse,
    ListTagsExtras,
    ListTagsResponse,
    Tag,
    TagGroup,
    TagInfo,
    TagTopicList,
    UpdateTagGroupRequestBody,
    UpdateTagGroupResponse,
)
from discourse_api.types.topics import (
    BasicTopic,
    CreateTopicTimerRequestBody,
    CreateTopicTimerResponse,
    CreatedBy,
    Details,
    GetSpecificPostsFromTopicRequestBody,
    GetSpecificPostsFromTopicResponse,
    GetTopicResponse,
    InviteGroupToTopicRequestBody,
    InviteGroupToTopicResponse,
    InviteToTopicRequestBody,
    InviteToTopicResponse,
    InvitedGroup,
    LastPoster,
    ListLatestTopicsResponse,
    ListTopTopicsResponse,
    Participant,
    PostStream,
    SetNotificationLevelRequestBody,
    SetNotificationLevelResponse,
    SuggestedTopic,
    SuggestedTopicPoster,
    Thumbnail,
    TopicPost,
    UpdateTopicRequestBody,
    UpdateTopicRequestBodyTopic,
    UpdateTopicResponse,
    UpdateTopicStatusRequestBody,
    UpdateTopicStatusResponse,
    UpdateTopicTimestampRequestBody,
    UpdateTopicTimestampResponse,
)
from discourse_api.types.uploads import (
    AbortMultipartRequestBody,
    AbortMultipartResponse,
    BatchPresignMultipartPartsRequestBody,
    BatchPresignMultipartPartsResponse,
    CompleteExternalUploadRequestBody,
    CompleteExternalUploadResponse,
    CompleteMultipartRequestBody,
    CompleteMultipartResponse,
    CreateMultipartUploadRequestBody,
    CreateMultipartUploadResponse,
    CreateUploadRequestBody,
    CreateUploadResponse,
    GeneratePresignedPutRequestBody,
    GeneratePresignedPutResponse,
    Metadata,
    Upload,
)
from discourse_api.types.users import (
    ActingUser,
    ActivateUserResponse,
    AdminGetUserResponse,
    AdminListUsersFlagResponse,
    AdminListUsersResponse,
    AnonymizeUserResponse,
    ChangePasswordRequestBody,
    CreateUserRequestBody,
    CreateUserResponse,
    DeactivateUserResponse,
    DeleteUserRequestBody,
    DeleteUserResponse,
    DirectoryItem,
    DirectoryMeta,
    DirectoryUser,
    ExternalIds,
    GetUserEmailsResponse,
    GetUserExternalIdResponse,
    GetUserIdentiyProviderExternalIdResponse,
    GetUserResponse,
    ListUserActionsResponse,
    ListUsersPublicResponse,
    LogOutUserResponse,
    PenaltyCounts,
    RefreshGravatarResponse,
    SendPasswordResetEmailRequestBody,
    SendPasswordResetEmailResponse,
    Silence,
    SilenceUserRequestBody,
    SilenceUserResponse,
    SuspendUserRequestBody,
    SuspendUserResponse,
    Suspension,
    UpdateAvatarRequestBody,
    UpdateAvatarResponse,
    UpdateEmailRequestBody,
    UpdateUserRequestBody,
    UpdateUserResponse,
    UpdateUsernameRequestBody,
    UserAction,
    UserDetail,
    UserFields,
    UserGroup,
    UserOption,
)
