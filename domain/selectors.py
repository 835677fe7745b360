# CSS selectors for the LinkedIn jobs search page and the Easy Apply dialog.

# Sign-in
GUEST_SIGN_IN_BUTTON = '[data-tracking-control-name="guest_homepage-basic_sign-in-button"]'
SESSION_KEY_INPUT = '[name="session_key"]'
SESSION_PASSWORD_INPUT = '[name="session_password"]'

# Search box
GLOBAL_NAV_JOBS = "#global-nav > div > nav > ul > li:nth-child(3)"
KEYWORD_INPUT = '[id^="jobs-search-box-keyword-id"]'
LOCATION_INPUT = '[id^="jobs-search-box-location-id"]'

# Search filters
EASY_APPLY_FILTER = (
    'button[aria-label="Easy Apply filter"]',
    'button[aria-label="Easy Apply filter."]',
    '[type="checkbox"][name="f_LF"]',
    ".search-reusables__filter-binary-toggle",
)
DATE_POSTED_FILTER = (
    'button[aria-label="Date posted filter"]',
    'button[aria-label="Date posted filter."]',
    "[data-test-filters-time-filter-button]",
    '[aria-label*="Time filter"]',
    "button.search-reusables__filter-pill",
    'button[aria-label*="date posted"]',
)
PAST_DAY_OPTION = (
    '[for="timePostedRange-r86400"]',
    'input[value="r86400"]',
    '[aria-label*="Past 24 hours"]',
    '[type="radio"][value="r86400"]',
)
SHOW_RESULTS_BUTTON = (
    "button.artdeco-button--primary",
    "button[data-test-filters-apply-button]",
    ".artdeco-modal__actionbar button:last-child",
    "button.search-reusables__secondary-filters-show-results-button",
)
WORKPLACE_FILTER_TRIGGER = ".search-reusables__filter-list>li:nth-child(8)>div"
WORKPLACE_SHOW_RESULTS = (
    ".search-reusables__filter-list>li:nth-child(8)>div>div>div>div>div>form>fieldset"
    ">div+hr+div>button+button"
)

# Result list
TOTAL_RESULTS_SUBTITLE = "[class*='jobs-search-results-list__subtitle']"
JOB_CARD_TEMPLATE = "[class*='jobs-search-two-pane__job-card-container--viewport-tracking-{index}']>div"

# Job details pane
EASY_APPLY_BUTTON = "[class*=jobs-apply-button]>button"
COMPANY_NAME_LINK = ".job-details-jobs-unified-top-card__company-name>a"
JOB_TITLE_LINK = ".job-details-jobs-unified-top-card__job-title>h1>a"
INLINE_FEEDBACK_MESSAGE = ".artdeco-inline-feedback__message"
SAFETY_REMINDER_CONTINUE = (
    'div[class="artdeco-modal__actionbar ember-view '
    'job-trust-pre-apply-safety-tips-modal__footer"]>button+div>div>button'
)

# Easy Apply dialog
EASY_APPLY_MODAL = ".jobs-easy-apply-modal"
FORM_PRIMARY_BUTTON = 'div[class="display-flex justify-flex-end ph5 pv4"]>button'
FORM_CONTINUE_BUTTON = 'div[class="display-flex justify-flex-end ph5 pv4"]>button + button'
SUBMIT_BUTTON_BY_LABEL = 'button[aria-label*="Submit"]'
COMPLETION_DIALOG = 'div[class*="artdeco-modal-overlay"]>div>div+div>div>button>span'
MODAL_DISMISS = (
    ".artdeco-modal__dismiss.artdeco-button.artdeco-button--circle.artdeco-button--muted"
    ".artdeco-button--2.artdeco-button--tertiary.ember-view"
)
MODAL_DISMISS_FALLBACKS = (
    'button[aria-label="Dismiss"]',
    ".artdeco-modal__dismiss",
)
DISCARD_CONFIRM = '[data-control-name="discard_application_confirm_btn"]'

# Pagination
PAGINATION = ".artdeco-pagination"
ACTIVE_PAGE_INDICATOR = ".artdeco-pagination__indicator--active"


def job_card(index: int) -> str:
    return JOB_CARD_TEMPLATE.format(index=index)
