# sellerbot/utils/messages.py
from typing import Dict, List
from ..models.category import Category, SpecificationType
from ..models.category_request import CategoryRequest, RequestStatus
from ..models.product import ProductDraft, SpecificationEntry
from ..models.stats import CatalogStats
from ..services.category_selector import CategorySelector
from .formatters import format_breadcrumb, format_datetime, is_rtl

TEXTS = {
    'en': {
        'welcome': "Hello {name}! 👋\n\nWelcome to the seller console.\n"
                   "/addproduct - add a product\n/requestcategory - request a new category\n"
                   "/language - switch language",
        'help': "📖 Commands:\n"
                "/addproduct - add a product to a category\n"
                "/requestcategory - ask for a new subcategory\n"
                "/catalog - catalog statistics (admins)\n"
                "/requests - submitted category requests (admins)\n"
                "/language - switch between English and Arabic\n"
                "/cancel - stop the current operation",
        'language_set': "🌐 Language set to English.",
        'cancelled': "❌ Operation cancelled.",
        'access_denied': "⛔️ You do not have access to this section.",
        'error': "❌ Something went wrong. Please try again.",
        'product_name': "🏷 Enter the product name:",
        'select_category': "🗂 Select the product category:",
        'select_parent': "🗂 Select the parent category where your new subcategory should be added:",
        'search_hint': "🔍 Type to search categories.",
        'search_results': "🔍 Results for \"{query}\":",
        'no_categories': "No categories found",
        'selected_category': "Selected Category",
        'category_path': "Category Path",
        'clear_search': "✖️ Clear search",
        'cancel': "🔙 Cancel",
        'category_set': "✅ Category selected for \"{name}\".",
        'specifications': "📋 Specifications to fill in:",
        'no_specifications': "This category has no predefined specifications.",
        'required': "required",
        'missing_required': "⚠️ Required before publishing: {keys}",
        'category_name': "📝 Category name (English):",
        'category_name_ar': "📝 Category name (Arabic):",
        'description': "📝 Description:",
        'description_ar': "📝 Description (Arabic), or /skip:",
        'business_justification': "💼 Business justification:",
        'expected_product_count': "🔢 Expected number of products:",
        'invalid_count': "❌ Expected product count must be at least 1. Please enter a number:",
        'target_market': "🎯 Target market, or /skip:",
        'request_submitted': "✅ Your category request has been submitted successfully! "
                             "Our team will review it within 1-3 business days.",
        'request_summary': "🆕 Request #{request_id}\n"
                           "Parent: {parent}\n"
                           "Name: {name} / {name_ar}\n"
                           "Expected products: {count}\n"
                           "Status: {status}\n"
                           "Submitted: {created_at}",
        'stats': "📊 Catalog\n"
                 "Categories: {total} (active {active}, inactive {inactive})\n"
                 "Root categories: {roots}\n"
                 "Leaf categories: {leaves}\n"
                 "Depth: {max_depth}\n"
                 "With specifications: {with_specifications}",
        'requests_header': "📨 Category requests: {total}\n"
                           "Pending {pending} · Under review {under_review} · "
                           "Approved {approved} · Rejected {rejected}",
        'no_requests': "📭 No category requests yet.",
        'status_pending': "⏳ Pending",
        'status_under_review': "🔎 Under review",
        'status_approved': "✅ Approved",
        'status_rejected': "❌ Rejected",
    },
    'ar': {
        'welcome': "مرحباً {name}! 👋\n\nأهلاً بك في لوحة البائع.\n"
                   "/addproduct - إضافة منتج\n/requestcategory - طلب فئة جديدة\n"
                   "/language - تغيير اللغة",
        'help': "📖 الأوامر:\n"
                "/addproduct - إضافة منتج إلى فئة\n"
                "/requestcategory - طلب فئة فرعية جديدة\n"
                "/catalog - إحصائيات الكتالوج (للمشرفين)\n"
                "/requests - طلبات الفئات المرسلة (للمشرفين)\n"
                "/language - التبديل بين الإنجليزية والعربية\n"
                "/cancel - إيقاف العملية الحالية",
        'language_set': "🌐 تم تعيين اللغة إلى العربية.",
        'cancelled': "❌ تم إلغاء العملية.",
        'access_denied': "⛔️ ليس لديك صلاحية الوصول إلى هذا القسم.",
        'error': "❌ حدث خطأ. يرجى المحاولة مرة أخرى.",
        'product_name': "🏷 أدخل اسم المنتج:",
        'select_category': "🗂 اختر فئة المنتج:",
        'select_parent': "🗂 اختر الفئة الرئيسية التي ستضاف إليها الفئة الفرعية الجديدة:",
        'search_hint': "🔍 اكتب للبحث في الفئات.",
        'search_results': "🔍 نتائج \"{query}\":",
        'no_categories': "لم يتم العثور على فئات",
        'selected_category': "الفئة المختارة",
        'category_path': "مسار الفئة",
        'clear_search': "✖️ مسح البحث",
        'cancel': "🔙 إلغاء",
        'category_set': "✅ تم اختيار الفئة لـ \"{name}\".",
        'specifications': "📋 المواصفات المطلوب تعبئتها:",
        'no_specifications': "لا توجد مواصفات محددة مسبقاً لهذه الفئة.",
        'required': "مطلوب",
        'missing_required': "⚠️ مطلوب قبل النشر: {keys}",
        'category_name': "📝 اسم الفئة (بالإنجليزية):",
        'category_name_ar': "📝 اسم الفئة (بالعربية):",
        'description': "📝 الوصف:",
        'description_ar': "📝 الوصف بالعربية، أو /skip:",
        'business_justification': "💼 المبرر التجاري:",
        'expected_product_count': "🔢 العدد المتوقع للمنتجات:",
        'invalid_count': "❌ يجب أن يكون العدد المتوقع للمنتجات 1 على الأقل. يرجى إدخال رقم:",
        'target_market': "🎯 السوق المستهدف، أو /skip:",
        'request_submitted': "✅ تم إرسال طلب الفئة بنجاح! سيقوم فريقنا بمراجعته خلال 1-3 أيام عمل.",
        'request_summary': "🆕 طلب رقم {request_id}\n"
                           "الفئة الرئيسية: {parent}\n"
                           "الاسم: {name} / {name_ar}\n"
                           "المنتجات المتوقعة: {count}\n"
                           "الحالة: {status}\n"
                           "تاريخ الإرسال: {created_at}",
        'stats': "📊 الكتالوج\n"
                 "الفئات: {total} (نشطة {active}، غير نشطة {inactive})\n"
                 "الفئات الرئيسية: {roots}\n"
                 "الفئات النهائية: {leaves}\n"
                 "العمق: {max_depth}\n"
                 "مع مواصفات: {with_specifications}",
        'requests_header': "📨 طلبات الفئات: {total}\n"
                           "قيد الانتظار {pending} · قيد المراجعة {under_review} · "
                           "مقبولة {approved} · مرفوضة {rejected}",
        'no_requests': "📭 لا توجد طلبات فئات بعد.",
        'status_pending': "⏳ قيد الانتظار",
        'status_under_review': "🔎 قيد المراجعة",
        'status_approved': "✅ مقبول",
        'status_rejected': "❌ مرفوض",
    },
}

SPECIFICATION_EMOJI = {
    SpecificationType.TEXT: "🔤",
    SpecificationType.NUMBER: "🔢",
    SpecificationType.SELECT: "🔘",
    SpecificationType.BOOLEAN: "☑️",
}

class Messages:
    @staticmethod
    def text(key: str, language: str = 'en', **kwargs) -> str:
        """Message in the session language, English when missing"""
        template = TEXTS.get(language, TEXTS['en']).get(key) or TEXTS['en'][key]
        return template.format(**kwargs) if kwargs else template

    @staticmethod
    def selector_prompt(selector: CategorySelector, prompt_key: str, language: str = 'en') -> str:
        """Text shown above the category tree keyboard"""
        rtl = is_rtl(language)
        lines = [Messages.text(prompt_key, language)]

        if selector.query:
            lines.append(Messages.text('search_results', language, query=selector.query))
            if not selector.categories:
                lines.append(Messages.text('no_categories', language))
        else:
            lines.append(Messages.text('search_hint', language))

        if selector.error:
            lines.append(f"⚠️ {selector.error}")

        if selector.path:
            lines.append("")
            lines.append(f"{Messages.text('selected_category', language)}:")
            lines.append(format_breadcrumb(selector.path, rtl))
        return "\n".join(lines)

    @staticmethod
    def format_specifications(category: Category, language: str = 'en') -> str:
        """Attribute checklist taken from the category's specification template"""
        rtl = is_rtl(language)
        if not category.specifications:
            return Messages.text('no_specifications', language)

        lines = [Messages.text('specifications', language)]
        for spec in category.specifications:
            name = spec.key_ar if rtl else spec.key
            line = f"{SPECIFICATION_EMOJI[SpecificationType(spec.type)]} {name}"
            if spec.required:
                line += f" ({Messages.text('required', language)})"
            if spec.type == SpecificationType.SELECT:
                choices = ", ".join(option.label_ar if rtl else option.label for option in spec.options)
                line += f": {choices}"
            lines.append(line)
        return "\n".join(lines)

    @staticmethod
    def format_product_category(draft: ProductDraft, path: List[Category], language: str = 'en') -> str:
        """Confirmation after a product category is chosen"""
        rtl = is_rtl(language)
        text = (
            f"{Messages.text('category_set', language, name=draft.name)}\n\n"
            f"{Messages.text('category_path', language)}:\n"
            f"{format_breadcrumb(path, rtl)}"
        )
        description = path[-1].display_description(rtl) if path else None
        if description:
            text += f"\n{description}"
        return text

    @staticmethod
    def format_missing_required(missing: List[SpecificationEntry], language: str = 'en') -> str:
        """Required attributes the seller still has to fill in, or an empty string"""
        if not missing:
            return ""
        keys = ", ".join(entry.key_ar if is_rtl(language) else entry.key for entry in missing)
        return Messages.text('missing_required', language, keys=keys)

    @staticmethod
    def status_label(status: RequestStatus, language: str = 'en') -> str:
        return Messages.text(f"status_{RequestStatus(status).value}", language)

    @staticmethod
    def format_category_request(request: CategoryRequest, parent_path: List[Category], language: str = 'en') -> str:
        rtl = is_rtl(language)
        return Messages.text(
            'request_summary', language,
            request_id=request.request_id,
            parent=format_breadcrumb(parent_path, rtl) or request.parent_category_id,
            name=request.category_name,
            name_ar=request.category_name_ar,
            count=request.expected_product_count,
            status=Messages.status_label(request.status, language),
            created_at=format_datetime(request.created_at)
        )

    @staticmethod
    def format_request_list(
        requests: List[CategoryRequest],
        parent_paths: Dict[int, List[Category]],
        counts: Dict[RequestStatus, int],
        language: str = 'en'
    ) -> str:
        """Admin overview: counts per status, then one summary per request"""
        if not requests:
            return Messages.text('no_requests', language)

        header = Messages.text(
            'requests_header', language,
            total=sum(counts.values()),
            **{status.value: count for status, count in counts.items()}
        )
        summaries = [
            Messages.format_category_request(request, parent_paths.get(request.request_id, []), language)
            for request in requests
        ]
        return "\n\n".join([header] + summaries)

    @staticmethod
    def format_stats(stats: CatalogStats, language: str = 'en') -> str:
        return Messages.text('stats', language, **stats.model_dump())
