"""Built-in text samples the language models are derived from.

Each sample is ordinary prose made of the most frequent words of its
language.  Only the trigram distribution matters, so the samples favour
function words and common inflections over meaning.
"""

from __future__ import annotations

TRIGRAM_CORPORA: dict[str, str] = {
    "en": (
        "The people of the town said that they would not be there for the "
        "meeting. It was the first time that the government and the company "
        "had to work with each other, and there is still a lot of work to do "
        "on the new system. We have been thinking about what this means for "
        "all of them, and which of these things should be done before the end "
        "of the year. She told him that there were other ways to find out "
        "about the information, but he wanted to hear it from the members of "
        "the council themselves. When they came back into the house, they "
        "found that everything had been moved."
    ),
    "da": (
        "Det er ikke så let at finde ud af, hvad der skal ske med de mange "
        "mennesker, som har været med til at bygge landet op. Vi har haft en "
        "god dag i byen, og det var dejligt at se, at der var så mange børn "
        "og forældre til stede. Hun sagde, at han skulle komme hjem til "
        "middag, men han blev på arbejdet til sent om aftenen. Regeringen "
        "har besluttet, at de nye regler skal gælde fra næste år, og at "
        "kommunerne selv skal stå for den første del af arbejdet. Der er "
        "mange, som mener, at det går for langsomt."
    ),
    "de": (
        "Die Regierung hat in der vergangenen Woche beschlossen, dass die "
        "neuen Regeln für alle Bürger gelten sollen. Es ist nicht leicht, "
        "eine Lösung zu finden, die für jeden richtig ist, aber wir müssen "
        "es versuchen. Sie sagte, dass er noch nicht zu Hause sei und dass "
        "sie auf ihn warten würde. Die Kinder spielen gern im Garten, wenn "
        "das Wetter schön ist, und die Großeltern sitzen dann auf der "
        "Terrasse. Nach dem Essen gehen wir mit den Freunden in die Stadt, "
        "um uns die Ausstellung über die Geschichte der Straße anzusehen. "
        "Über diese Frage wird schon lange gesprochen."
    ),
    "es": (
        "El gobierno de la ciudad ha decidido que las nuevas normas se "
        "aplicarán a partir del próximo año. Es muy importante que todos los "
        "ciudadanos conozcan sus derechos y que puedan participar en las "
        "decisiones que se toman en el país. La mujer dijo que su hijo no "
        "había llegado todavía a la casa, pero que lo estaba esperando con "
        "mucha ilusión. Después de la reunión, los miembros del consejo se "
        "fueron a comer juntos en un restaurante cerca de la plaza. También "
        "hablaron de la situación económica y de los problemas de la región, "
        "que son cada vez más graves para las familias."
    ),
    "fr": (
        "Le gouvernement a décidé que les nouvelles règles seront appliquées "
        "dès l'année prochaine dans toutes les régions du pays. Il est très "
        "important que chacun puisse donner son avis sur les questions qui "
        "concernent la vie de tous les jours. Elle a dit qu'il n'était pas "
        "encore rentré à la maison et qu'elle l'attendait depuis le début de "
        "la soirée. Après la réunion, les membres du conseil sont allés "
        "déjeuner ensemble dans un restaurant près de la gare. Nous avons "
        "parlé de la situation économique et des problèmes que rencontrent "
        "les familles de la ville pendant cette période."
    ),
    "it": (
        "Il governo ha deciso che le nuove regole saranno applicate a partire "
        "dal prossimo anno in tutte le regioni del paese. È molto importante "
        "che tutti i cittadini conoscano i loro diritti e che possano "
        "partecipare alle decisioni della comunità. La donna ha detto che il "
        "figlio non era ancora tornato a casa, ma che lo stava aspettando "
        "con grande gioia. Dopo la riunione, i membri del consiglio sono "
        "andati a pranzo insieme in un ristorante vicino alla piazza. Hanno "
        "parlato anche della situazione economica e dei problemi della città, "
        "che diventano sempre più gravi per le famiglie."
    ),
    "nl": (
        "De regering heeft besloten dat de nieuwe regels vanaf volgend jaar "
        "voor alle inwoners van het land zullen gelden. Het is erg belangrijk "
        "dat iedereen zijn mening kan geven over de vragen die het dagelijks "
        "leven van de mensen betreffen. Zij zei dat hij nog niet thuis was "
        "gekomen en dat ze al de hele avond op hem wachtte. Na de vergadering "
        "zijn de leden van de raad samen gaan eten in een restaurant bij het "
        "station. Wij hebben ook gesproken over de economische situatie en "
        "over de problemen van de gezinnen in de stad."
    ),
    "no": (
        "Regjeringen har bestemt at de nye reglene skal gjelde for alle som "
        "bor i landet fra neste år. Det er veldig viktig at alle kan si sin "
        "mening om spørsmålene som gjelder hverdagen til folk. Hun sa at han "
        "ikke var kommet hjem ennå, og at hun hadde ventet på ham hele "
        "kvelden. Etter møtet gikk medlemmene av rådet sammen for å spise på "
        "en restaurant ved stasjonen. Vi har også snakket om den økonomiske "
        "situasjonen og om problemene som familiene i byen har fått i løpet "
        "av det siste året."
    ),
    "pt": (
        "O governo decidiu que as novas regras serão aplicadas a partir do "
        "próximo ano em todas as regiões do país. É muito importante que "
        "todos os cidadãos conheçam os seus direitos e que possam participar "
        "nas decisões da comunidade. A mulher disse que o filho ainda não "
        "tinha chegado a casa, mas que estava à espera dele com muita "
        "alegria. Depois da reunião, os membros do conselho foram almoçar "
        "juntos num restaurante perto da praça. Também falaram da situação "
        "económica e dos problemas da cidade, que são cada vez mais graves "
        "para as famílias."
    ),
    "sv": (
        "Regeringen har beslutat att de nya reglerna ska gälla för alla som "
        "bor i landet från och med nästa år. Det är mycket viktigt att alla "
        "kan säga sin mening om de frågor som gäller människornas vardag. Hon "
        "sa att han inte hade kommit hem ännu och att hon hade väntat på "
        "honom hela kvällen. Efter mötet gick medlemmarna i rådet tillsammans "
        "för att äta på en restaurang vid stationen. Vi har också pratat om "
        "den ekonomiska situationen och om de problem som familjerna i staden "
        "har fått under det senaste året."
    ),
    "cs": (
        "Vláda rozhodla, že nová pravidla budou platit pro všechny obyvatele "
        "země od příštího roku. Je velmi důležité, aby každý mohl říct svůj "
        "názor na otázky, které se týkají každodenního života lidí. Řekla, "
        "že ještě nepřišel domů a že na něj čekala celý večer. Po schůzi šli "
        "členové rady společně na oběd do restaurace u nádraží. Mluvili jsme "
        "také o hospodářské situaci a o problémech, které mají rodiny ve "
        "městě během posledního roku. Děti si hrají na zahradě, když je "
        "hezké počasí."
    ),
    "hu": (
        "A kormány úgy döntött, hogy az új szabályok jövő évtől az ország "
        "minden lakójára vonatkoznak. Nagyon fontos, hogy mindenki "
        "elmondhassa a véleményét azokról a kérdésekről, amelyek az emberek "
        "mindennapi életét érintik. Azt mondta, hogy még nem ért haza, és "
        "hogy egész este várt rá. Az ülés után a tanács tagjai együtt mentek "
        "ebédelni egy étterembe az állomás mellett. Beszéltünk a gazdasági "
        "helyzetről és a családok problémáiról is, amelyek a városban egyre "
        "nagyobbak lettek az elmúlt évben."
    ),
    "pl": (
        "Rząd zdecydował, że nowe przepisy będą obowiązywać wszystkich "
        "mieszkańców kraju od przyszłego roku. To bardzo ważne, aby każdy "
        "mógł wyrazić swoje zdanie w sprawach, które dotyczą codziennego "
        "życia ludzi. Powiedziała, że jeszcze nie wrócił do domu i że czekała "
        "na niego przez cały wieczór. Po zebraniu członkowie rady poszli "
        "razem na obiad do restauracji przy dworcu. Rozmawialiśmy także o "
        "sytuacji gospodarczej i o problemach, z którymi borykają się "
        "rodziny w mieście w ciągu ostatniego roku."
    ),
    "ro": (
        "Guvernul a hotărât că noile reguli se vor aplica tuturor locuitorilor "
        "țării începând de anul viitor. Este foarte important ca fiecare să "
        "își poată spune părerea despre întrebările care privesc viața de zi "
        "cu zi a oamenilor. Ea a spus că el nu a ajuns încă acasă și că l-a "
        "așteptat toată seara. După ședință, membrii consiliului au mers "
        "împreună la prânz într-un restaurant de lângă gară. Am vorbit și "
        "despre situația economică și despre problemele familiilor din oraș "
        "în ultimul an."
    ),
    "ru": (
        "Правительство решило, что новые правила будут действовать для всех "
        "жителей страны со следующего года. Очень важно, чтобы каждый мог "
        "высказать своё мнение по вопросам, которые касаются повседневной "
        "жизни людей. Она сказала, что он ещё не вернулся домой и что она "
        "ждала его весь вечер. После собрания члены совета пошли вместе "
        "обедать в ресторан возле вокзала. Мы также говорили об "
        "экономическом положении и о проблемах, с которыми столкнулись семьи "
        "в городе за последний год. Это было не так просто, как они думали."
    ),
    "el": (
        "Η κυβέρνηση αποφάσισε ότι οι νέοι κανόνες θα ισχύουν για όλους τους "
        "κατοίκους της χώρας από τον επόμενο χρόνο. Είναι πολύ σημαντικό να "
        "μπορεί ο καθένας να πει τη γνώμη του για τα θέματα που αφορούν την "
        "καθημερινή ζωή των ανθρώπων. Είπε ότι δεν είχε γυρίσει ακόμα στο "
        "σπίτι και ότι τον περίμενε όλο το βράδυ. Μετά τη συνάντηση τα μέλη "
        "του συμβουλίου πήγαν μαζί για φαγητό σε ένα εστιατόριο κοντά στο "
        "σταθμό. Μιλήσαμε επίσης για την οικονομική κατάσταση και για τα "
        "προβλήματα των οικογενειών της πόλης."
    ),
    "he": (
        "הממשלה החליטה שהכללים החדשים יחולו על כל תושבי המדינה החל מהשנה "
        "הבאה. חשוב מאוד שכל אחד יוכל להביע את דעתו בשאלות שנוגעות לחיי "
        "היום יום של האנשים. היא אמרה שהוא עוד לא חזר הביתה ושהיא חיכתה לו "
        "כל הערב. אחרי הישיבה הלכו חברי המועצה יחד לאכול במסעדה ליד התחנה. "
        "דיברנו גם על המצב הכלכלי ועל הבעיות של המשפחות בעיר במהלך השנה "
        "האחרונה. זה לא היה פשוט כמו שהם חשבו."
    ),
    "ar": (
        "قررت الحكومة أن القواعد الجديدة ستطبق على جميع سكان البلاد ابتداء "
        "من العام المقبل. من المهم جدا أن يتمكن كل شخص من التعبير عن رأيه في "
        "المسائل التي تتعلق بالحياة اليومية للناس. قالت إنه لم يعد إلى البيت "
        "بعد وإنها كانت تنتظره طوال المساء. بعد الاجتماع ذهب أعضاء المجلس معا "
        "لتناول الغداء في مطعم قريب من المحطة. تحدثنا أيضا عن الوضع "
        "الاقتصادي وعن المشاكل التي تواجهها العائلات في المدينة خلال العام "
        "الماضي."
    ),
    "tr": (
        "Hükümet, yeni kuralların gelecek yıldan itibaren ülkede yaşayan "
        "herkes için geçerli olacağına karar verdi. Herkesin insanların "
        "günlük hayatını ilgilendiren konularda fikrini söyleyebilmesi çok "
        "önemlidir. Onun henüz eve dönmediğini ve bütün akşam onu beklediğini "
        "söyledi. Toplantıdan sonra meclis üyeleri istasyonun yanındaki bir "
        "lokantada birlikte öğle yemeği yediler. Ayrıca ekonomik durum ve "
        "şehirdeki ailelerin geçen yıl boyunca yaşadığı sorunlar hakkında da "
        "konuştuk. Çocuklar bahçede oynuyor."
    ),
}

# Frequent characters of the CJK languages: kana and punctuation plus the
# commonest ideographs or syllables.
_JA_KANA = "".join(chr(c) for c in range(0x3041, 0x3097)) + "".join(
    chr(c) for c in range(0x30A1, 0x30FB)
)

FREQUENT_CHARACTERS: dict[str, str] = {
    "ja": _JA_KANA
    + "ー。、「」・"
    + "日本人大年出中一上子国生見行時分事会社自者地業方新場員立開手力問代明"
    "動京目通言理体田主題意不作用度強公持野以思家世多正安院心界教文元重近考"
    "画海売知道集別物使品計死特私始朝運終台広住真有口少町料工建空急止送切転"
    "研足究楽起着店病質待試族銀早映親験英医仕去味写字答夜音注帰古歌買悪図週"
    "室歩風紙黒花春赤青館屋色走秋夏習駅洋旅服夕借曜飲肉貸堂鳥飯勉冬昼茶弟牛"
    "魚兄犬妹姉漢語今何高気前後下長先入来",
    "zh": "，。、「」"
    + "的一是不了人我在有他这中大来上国个到说们为子和你地出道也时年得就那要下"
    "以生会自着去之过家学对可她里后小么心多天而能好都然没日于起还发成事只作"
    "当想看文无开手十用主行方又如前所本见经头面公同三已老从动两长知民样现分"
    "将外但身些与高意进把法此实回二理美点月明其种声全工己话儿者向情部正名定"
    "女问力机给等几很业最间新什打便位因重被走电四第门相次东政海口使教西再平"
    "真听世气信北少关并内加化由却代军产入先山五太水万市眼体别处总才场师书比"
    "住员九笑性通目华报立马命张活难神数件安表原车白应路期叫死常提感金何更反"
    "合放做系计或司利受光王果亲界及今京务制解各任至清物台象记边共风战干接它"
    "許這個們國來說為會時對後過學無開將動點從現經還發實體當關長問題樣麼與",
    "ko": "이의다는에가을하고를서지기한로사으도나자리어대인수보시일그있것해게적면아"
    "정만구제라요부전상소주장국들내없니세되우생계말원여년위동연중성문까마무합"
    "했방화회진경공신재분실선저안때그래서우리또한",
}
